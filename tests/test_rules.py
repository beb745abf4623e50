import unittest

from acesup.Card import Deck, parseCards
from acesup.Rules import DEAL, MOVE, REMOVE, canMove, canRemove, checkLoss, checkWin, findHint
from acesup.Tableau import Tableau


def tableau_of(*stacks):
    t = Tableau()
    for i, codes in enumerate(stacks):
        for card in parseCards(codes):
            t.push(i, card)
    return t


class CanRemoveTestCase(unittest.TestCase):
    def test_lower_card_of_same_suit_is_removable(self):
        t = tableau_of("7H", "9H", "", "")
        self.assertTrue(canRemove(t, t.peekTop(0), 0))
        self.assertFalse(canRemove(t, t.peekTop(1), 1))

    def test_equal_value_never_qualifies(self):
        t = tableau_of("7H", "7H", "", "")
        self.assertFalse(canRemove(t, t.peekTop(0), 0))
        self.assertFalse(canRemove(t, t.peekTop(1), 1))

    def test_same_color_other_suit_does_not_count(self):
        t = tableau_of("7H", "KD", "QS", "2C")
        self.assertFalse(canRemove(t, t.peekTop(0), 0))

    def test_only_exposed_cards_count(self):
        t = tableau_of("7H", "KH 2C", "", "")
        self.assertFalse(canRemove(t, t.peekTop(0), 0))

    def test_ace_is_never_removable(self):
        t = tableau_of("AH", "KH", "QH", "JH")
        self.assertFalse(canRemove(t, t.peekTop(0), 0))
        self.assertTrue(canRemove(t, t.peekTop(1), 1))

    def test_ace_beats_everything_of_its_suit(self):
        t = tableau_of("KS", "AS", "", "")
        self.assertTrue(canRemove(t, t.peekTop(0), 0))


class CanMoveTestCase(unittest.TestCase):
    def test_move_to_empty_stack(self):
        t = tableau_of("5C 6D", "", "9S", "")
        top = t.peekTop(0)
        self.assertTrue(canMove(t, top, 0, 1))
        self.assertTrue(canMove(t, top, 0, 3))
        self.assertFalse(canMove(t, top, 0, 2))
        self.assertFalse(canMove(t, top, 0, 0))

    def test_only_the_top_card_moves(self):
        t = tableau_of("5C 6D", "", "", "")
        buried = t.getStack(0)[0]
        self.assertFalse(canMove(t, buried, 0, 1))

    def test_card_must_be_the_same_object(self):
        t = tableau_of("6D", "", "", "")
        twin = parseCards("6D")[0]
        self.assertFalse(canMove(t, twin, 0, 1))


class TerminalStateTestCase(unittest.TestCase):
    def test_four_aces_with_empty_deck_is_a_win(self):
        t = tableau_of("AS", "AH", "AD", "AC")
        self.assertTrue(checkWin(t, Deck()))

    def test_four_aces_on_one_stack_is_still_a_win(self):
        t = tableau_of("AS AH AD AC", "", "", "")
        self.assertTrue(checkWin(t, Deck()))

    def test_no_win_while_deck_has_cards(self):
        t = tableau_of("AS", "AH", "AD", "AC")
        self.assertFalse(checkWin(t, Deck(parseCards("2H"))))

    def test_no_win_with_extra_cards(self):
        t = tableau_of("AS", "AH", "AD", "AC 2C")
        self.assertFalse(checkWin(t, Deck()))

    def test_loss_when_nothing_is_legal(self):
        t = tableau_of("2S", "3H", "4D", "5C")
        self.assertTrue(checkLoss(t, Deck()))

    def test_no_loss_when_a_move_is_legal(self):
        t = tableau_of("2S", "3H", "4D", "")
        self.assertFalse(checkLoss(t, Deck()))

    def test_no_loss_when_a_remove_is_legal(self):
        t = tableau_of("2S", "3S", "4D", "5C")
        self.assertFalse(checkLoss(t, Deck()))

    def test_no_loss_while_deck_has_cards(self):
        t = tableau_of("2S", "3H", "4D", "5C")
        self.assertFalse(checkLoss(t, Deck(parseCards("9H"))))


class FindHintTestCase(unittest.TestCase):
    def test_remove_is_preferred_in_stack_order(self):
        t = tableau_of("9C", "3S", "KS", "QC")
        hint = findHint(t, Deck())
        self.assertEqual(REMOVE, hint.kind)
        self.assertEqual(0, hint.stack)

    def test_move_when_nothing_is_removable(self):
        t = tableau_of("2S", "3H 4C", "", "5D")
        hint = findHint(t, Deck())
        self.assertEqual(MOVE, hint.kind)
        self.assertEqual((0, 2), (hint.stack, hint.toStack))

    def test_deck_when_nothing_else(self):
        t = tableau_of("2S", "3H", "4D", "5C")
        hint = findHint(t, Deck(parseCards("KH")))
        self.assertEqual(DEAL, hint.kind)
        self.assertEqual("DEAL", hint.to_notation())

    def test_no_hint_when_lost(self):
        t = tableau_of("2S", "3H", "4D", "5C")
        self.assertIsNone(findHint(t, Deck()))


if __name__ == "__main__":
    unittest.main()
