"""
tasklist: in-memory task list with categories, due dates and a Telegram front end.
"""
