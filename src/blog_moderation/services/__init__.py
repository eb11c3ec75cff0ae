"""Business logic shared by the command-line screens."""
