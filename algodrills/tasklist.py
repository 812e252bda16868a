"""A first-in, first-out list of tasks."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional


class TaskList:
    """Tasks added at the back and taken from the front."""

    def __init__(self) -> None:
        self._tasks: Deque[str] = deque()

    def insert_back(self, task: str) -> None:
        self._tasks.append(task)

    def remove_front(self) -> str:
        """Remove and return the first task; IndexError if there is none."""
        if not self._tasks:
            raise IndexError("remove from empty task list")
        return self._tasks.popleft()

    def is_empty(self) -> bool:
        return not self._tasks

    def lines(self) -> Iterator[str]:
        """Numbered lines, one per task, starting from 1."""
        for number, task in enumerate(self._tasks, start=1):
            yield f"{number}. {task}"

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a short demonstration of the task list."""
    tasks = TaskList()
    for task in ("clean desktop", "wash the laundry", "do homeworks"):
        tasks.insert_back(task)

    print("Tasks not done:")
    for line in tasks.lines():
        print(line)

    print(f"  done: {tasks.remove_front()}")

    tasks.insert_back("wash dishes")
    tasks.insert_back("collect rubbish")

    print()
    print("Tasks not done:")
    for line in tasks.lines():
        print(line)

    while not tasks.is_empty():
        print(f"  done: {tasks.remove_front()}")

    if tasks.is_empty():
        print("All the tasks done!")
    return 0