"""
Состояния для FSM (отсутствие состояния — пользователь свободен)
"""

from aiogram.fsm.state import State, StatesGroup


class RegistrationStates(StatesGroup):
    first_name = State()
    last_name = State()
    phone = State()


class QuizStates(StatesGroup):
    in_progress = State()
