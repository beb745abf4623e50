from acesup.Card import Card
from acesup.Errors import EmptyStack, InvalidStack

STACK_COUNT = 4


class Tableau:
    """
    The four piles in play. Cards are only pushed onto or popped from the
    top (end) of a stack.
    """

    def __init__(self, stackCount=STACK_COUNT):
        self.stacks = [[] for _ in range(stackCount)]

    def __checkIndex(self, stackIndex):
        if not isinstance(stackIndex, int) or stackIndex < 0 or stackIndex >= len(self.stacks):
            raise InvalidStack(stackIndex)

    def push(self, stackIndex, card: Card):
        self.__checkIndex(stackIndex)
        self.stacks[stackIndex].append(card)

    def peekTop(self, stackIndex):
        self.__checkIndex(stackIndex)
        stack = self.stacks[stackIndex]
        if len(stack) == 0:
            return None
        return stack[-1]

    def popTop(self, stackIndex) -> Card:
        self.__checkIndex(stackIndex)
        stack = self.stacks[stackIndex]
        if len(stack) == 0:
            raise EmptyStack(stackIndex)
        return stack.pop()

    def isEmpty(self, stackIndex):
        self.__checkIndex(stackIndex)
        return len(self.stacks[stackIndex]) == 0

    def stackSize(self, stackIndex):
        self.__checkIndex(stackIndex)
        return len(self.stacks[stackIndex])

    def getStack(self, stackIndex):
        self.__checkIndex(stackIndex)
        return tuple(self.stacks[stackIndex])

    def tops(self):
        return [stack[-1] if stack else None for stack in self.stacks]

    def allCards(self):
        return {card for stack in self.stacks for card in stack}

    def size(self):
        return sum(len(stack) for stack in self.stacks)
