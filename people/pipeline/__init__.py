"""
pipeline package
----------------
Use cases built on the parsed log:

- read_logs: Aggregate log from the `log/` directory
- merge: Merge logs by date
- per_person: Per-person projection and file writing
- interactions: Last interactions and reachout reminders
- summary: Console table of last interactions
- cli: Click command-line interface
"""
