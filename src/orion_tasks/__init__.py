"""Personal task-tracking engine: to-dos, deadlines and events in a local CSV file."""

__version__ = "0.1.0"
