"""CHIP-8 stack operations."""

from chip8.errors import StackOverflow, StackUnderflow
from chip8.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= stack.capacity:
        raise StackOverflow(stack.capacity)
    new_data = stack.data.at[stack.pointer].set(address & 0xFFFF)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop address from stack."""
    if stack.pointer == 0:
        raise StackUnderflow()
    new_pointer = stack.pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
