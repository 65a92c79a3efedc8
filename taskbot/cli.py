#!/usr/bin/env python3
"""
TASKBOT - CLI Interface
=======================
Command-line tool for the personal task list.

Usage:
    taskbot todo "read book"
    taskbot deadline "submit report" --by "2024-05-01 2359"
    taskbot event "team dinner" --at "2024-06-01 1800-2000"
    taskbot done 2
    taskbot delete 1
    taskbot list
    taskbot find 2024-06-01
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from .errors import TaskbotError
from .manager import TaskManager
from .schema import StorageConfig


def build_parser() -> argparse.ArgumentParser:
    defaults = StorageConfig.from_env()

    # Shared by every subcommand so options work after the command name
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", default=defaults.directory, help="Directory holding the task file")
    common.add_argument("--file", default=defaults.filename, help="Task file name")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="taskbot",
        description="TASKBOT - personal task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskbot todo "read book"                           Add a todo
  taskbot deadline "submit report" --by "2024-05-01 2359"
  taskbot event "team dinner" --at "2024-06-01 1800-2000"
  taskbot done 2                                     Mark task 2 as done
  taskbot delete 1                                   Delete task 1
  taskbot list                                       Show all tasks
  taskbot find 2024-06-01                            Tasks on a date
  taskbot find "2024-06-01 1800"                     Tasks at an exact time
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD commands (todo / deadline / event)
    todo_parser = subparsers.add_parser("todo", parents=[common], help="Add a todo")
    todo_parser.add_argument("description", help="What to do")

    deadline_parser = subparsers.add_parser("deadline", parents=[common], help="Add a deadline")
    deadline_parser.add_argument("description", help="What is due")
    deadline_parser.add_argument("--by", required=True, help="Due date/time, e.g. 2024-05-01 2359")

    event_parser = subparsers.add_parser("event", parents=[common], help="Add an event")
    event_parser.add_argument("description", help="What is happening")
    event_parser.add_argument("--at", required=True, help="Date/time or range, e.g. 2024-06-01 1800-2000")

    # DONE command
    done_parser = subparsers.add_parser("done", parents=[common], help="Mark a task as done")
    done_parser.add_argument("index", type=int, help="Task number from `list`")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", parents=[common], help="Delete a task")
    delete_parser.add_argument("index", type=int, help="Task number from `list`")

    # LIST command
    list_parser = subparsers.add_parser("list", parents=[common], help="Show all tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # FIND command
    find_parser = subparsers.add_parser("find", parents=[common], help="Find tasks on a date")
    find_parser.add_argument("date", help="YYYY-MM-DD, optionally followed by HHMM")
    find_parser.add_argument("--json", action="store_true", help="Output matching indexes as JSON")

    # PATH command
    subparsers.add_parser("path", parents=[common], help="Show the task file path")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = StorageConfig(directory=args.dir, filename=args.file)

    if args.command == "path":
        print(os.path.abspath(config.path))
        return 0

    try:
        manager = TaskManager(config)
        return run_command(manager, args)
    except ValidationError as e:
        print(f"❌ Invalid task: {e.errors()[0]['msg']}")
        return 1
    except TaskbotError as e:
        print(f"❌ {e}")
        return 1


def run_command(manager: TaskManager, args: argparse.Namespace) -> int:
    store = manager.store

    if args.command == "todo":
        index = manager.add_todo(args.description)
        print(f"✅ Added: {store.retrieve(index)}")
        print(f"   Now {store.get_num_tasks()} task(s) in the list")

    elif args.command == "deadline":
        index = manager.add_deadline(args.description, args.by)
        print(f"✅ Added: {store.retrieve(index)}")
        print(f"   Now {store.get_num_tasks()} task(s) in the list")

    elif args.command == "event":
        index = manager.add_event(args.description, args.at)
        print(f"✅ Added: {store.retrieve(index)}")
        print(f"   Now {store.get_num_tasks()} task(s) in the list")

    elif args.command == "done":
        manager.mark_done(args.index)
        print("✅ Nice! Marked as done:")
        print(f"   {store.retrieve(args.index)}")

    elif args.command == "delete":
        preview = store.retrieve(args.index)
        manager.delete(args.index)
        print(f"🗑️ Deleted: {preview}")
        print(f"   Now {store.get_num_tasks()} task(s) in the list")

    elif args.command == "list":
        if args.json:
            print(json.dumps(manager.list_tasks(), indent=2))
        else:
            print(manager.get_list_report())

    elif args.command == "find":
        if args.json:
            print(json.dumps(manager.search_by_date(args.date) or []))
        else:
            print(manager.get_search_report(args.date))

    return 0


if __name__ == "__main__":
    sys.exit(main())
