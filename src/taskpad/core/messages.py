# src/taskpad/core/messages.py

"""User-facing message texts shared by the task list, commands and console."""

GREETING = "Hello! What can I do for you? Type 'help' to list commands."
FAREWELL = "Bye. Hope to see you again soon!"

TASK_ADDED = "Got it. I've added this task:"
TASK_REMOVED = "Noted. I've removed this task:"
TASK_MARKED_DONE = "Nice! I've marked this task as done:"
TOTAL_TASKS = "Now you have {count} task{plural} in the list."
LIST_HEADER = "Here are the tasks in your list:"
MATCH_HEADER = "Here are the matching tasks in your list:"
DATE_SUMMARY = "You have {deadlines} deadline{d_plural} and {events} event{e_plural} on {date}."
DATE_DEADLINES_LABEL = "Deadlines:"
DATE_EVENTS_LABEL = "Events:"

ERROR_NO_MATCH = "There are no tasks matching your keyword."
ERROR_INVALID_TASK_NUMBER = "That task number does not exist in your list."
ERROR_WRITE_TO_FILE = "I could not save your tasks to the data file."
ERROR_LOAD_FROM_FILE = "I could not read your saved tasks; starting with an empty list."
ERROR_NOT_A_TASK_NUMBER = "The task number must be a whole number."
ERROR_MISSING_TASK_NUMBER = "Please tell me which task number to use."
ERROR_EMPTY_DESCRIPTION = "The description of a {kind} cannot be empty."
ERROR_MISSING_WHEN = "A {kind} needs a date: use '{kind} <description> /{label} <date>'."
ERROR_INVALID_WHEN = "The /{label} text cannot contain line breaks or another '({label}: '."
ERROR_EMPTY_KEYWORD = "Please give me a keyword to search for."
ERROR_INVALID_DATE = "I don't understand that date. Use yyyy-mm-dd, e.g. 2019-12-02."
ERROR_UNKNOWN_COMMAND = "I'm sorry, but I don't know what '{name}' means. Type 'help' to list commands."
ERROR_INTERNAL = "Internal error while handling that command."

INDENT = "  "


def total_tasks(count: int) -> str:
    return TOTAL_TASKS.format(count=count, plural="" if count == 1 else "s")


def date_summary(deadlines: int, events: int, date: str) -> str:
    return DATE_SUMMARY.format(
        deadlines=deadlines,
        d_plural="" if deadlines == 1 else "s",
        events=events,
        e_plural="" if events == 1 else "s",
        date=date,
    )
