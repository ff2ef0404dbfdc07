from enum import Enum


class DemoState(str, Enum):
    WIDEN = "widen"
    NARROW = "narrow"
    CHECKED_ADD = "checked_add"
    UNCHECKED_ADD = "unchecked_add"
    EXIT = "exit"


# strictly ordered, there is no way back
NEXT_STATE = {
    DemoState.WIDEN: DemoState.NARROW,
    DemoState.NARROW: DemoState.CHECKED_ADD,
    DemoState.CHECKED_ADD: DemoState.UNCHECKED_ADD,
    DemoState.UNCHECKED_ADD: DemoState.EXIT,
}
