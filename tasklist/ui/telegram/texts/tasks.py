TITLE = "✨ To-Do List"
EMPTY_LIST = "No tasks here yet."

ASK_TEXT = "✍️ Enter your task"
ASK_DATE = "🗓️ Due date? YYYY-MM-DD, 'today', 'tomorrow' or '-' to clear."
ASK_TIME = "🕒 Time? e.g. 07:30 AM"
ASK_CATEGORY = "📑 Pick a category:"

TASK_ADDED = "Task added."
EMPTY_TEXT = "Task text is empty. Enter your task first."
TOGGLED = "Updated ✅"
DELETED = "Deleted 🗑️"
CANCELLED = "Cancelled."
NOT_AUTHORIZED = "Not authorized."
MORE_ROWS = "…and {n} more"
