from acesup.Core import Core
from acesup.History import CallDeal, CardMove, GameEvent, RemoveCard
from acesup_ui.view_model import CardView, EventView, GameViewModel, HintView, SelectionView, StackView


class CoreAdapter:
    """Turns live Core state into immutable snapshots for views."""

    @staticmethod
    def card_view(card) -> CardView:
        return CardView(rank=card.rank, suit=card.suit, face_up=card.faceUp)

    @staticmethod
    def snapshot(core: Core) -> GameViewModel:
        stacks = tuple(
            StackView(cards=tuple(CoreAdapter.card_view(card) for card in stack))
            for stack in core.tableau.stacks
        )
        selection = None
        if core.selection is not None:
            (card, stack_idx) = core.selection
            selection = SelectionView(stack=stack_idx, rank=card.rank, suit=card.suit)
        hint = None
        if core.hint is not None:
            hint = HintView(kind=core.hint.kind, stack=core.hint.stack, to_stack=core.hint.toStack)
        return GameViewModel(
            stacks=stacks,
            deck_count=core.deck.size(),
            discard_count=len(core.discards),
            selection=selection,
            hint=hint,
            move_count=core.moveCount,
            started=core.started,
            start_time=core.startTime,
            elapsed_sec=round(core.elapsed(), 3),
            status=core.status,
        )

    @staticmethod
    def event_to_view(event: GameEvent) -> EventView:
        if isinstance(event, CallDeal):
            return EventView(
                type="DEAL",
                payload={"cards": [str(card) for card in event.cards]},
            )
        if isinstance(event, RemoveCard):
            return EventView(
                type="REMOVE",
                payload={"card": str(event.card), "stack": event.fromStack},
            )
        if isinstance(event, CardMove):
            return EventView(
                type="MOVE",
                payload={"card": str(event.card), "src": event.fromStack, "dest": event.toStack},
            )
        return EventView(type="UNKNOWN", payload={"event": type(event).__name__})
