"""local_todo: single-user task list with local persistence and a mock signup/login flow."""

__version__ = "0.1.0"
