from aiogram.fsm.state import State, StatesGroup


class DraftFlow(StatesGroup):
    enter_text = State()
    enter_date = State()
    enter_time = State()
