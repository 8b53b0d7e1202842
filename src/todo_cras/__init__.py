"""todo-cras: a category-grouped todo list for the terminal and the shell greeting."""

__version__ = "0.3.0"
