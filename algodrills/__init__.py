"""Algorithm and data-structure drills: grid rectangles, a task list, searches, sorts and list rewrites, with command-line runners."""

__version__ = "0.1.0"