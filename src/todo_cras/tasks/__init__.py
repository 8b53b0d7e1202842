"""
Task file subsystem.

Components:
- task_models.py: data structures (Color, Task, Category, TaskList, DisplayLine)
- task_errors.py: FileAccessError / ParseError / StructuralError
- task_parser.py: single-line parser
- task_registry.py: folds parsed lines into a TaskList
- task_store.py: reads the task file and loads it
"""
