"""Mutable board state and the rule set that moves cards between piles."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from scoundrel.simulation.cards import Card, new_deck

logger = logging.getLogger(__name__)

STARTING_HP = 20
ROOM_SIZE = 4


class Board:
    """Owns the four piles and the player's hit points.

    Cards only ever move between piles (removed from one, appended to
    another), so the total number of cards in play is constant after setup.
    Index-based operations ignore out-of-range indices and return False
    instead of raising.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        starting_hp: int = STARTING_HP,
        room_size: int = ROOM_SIZE,
    ) -> None:
        self.rng = rng or random.Random()
        self.starting_hp = starting_hp
        self.room_size = room_size

        # The top of the draw pile is the end of the list
        self.draw_pile: list[Card] = []
        self.table_pile: list[Card] = []
        self.discard_pile: list[Card] = []
        self.player_hand: list[Card] = []
        self.player_hp = starting_hp

    def setup(self) -> None:
        """Shuffle a full deck into the draw pile and reset everything else."""
        self.draw_pile = new_deck()
        self.rng.shuffle(self.draw_pile)
        self.table_pile = []
        self.discard_pile = []
        self.player_hand = []
        self.player_hp = self.starting_hp
        logger.debug(f"Board set up with {len(self.draw_pile)} cards, {self.player_hp}hp")

    def filter_draw_pile(self, condition: Callable[[Card], bool]) -> int:
        """Remove every draw-pile card matching condition. Returns count removed."""
        before = len(self.draw_pile)
        self.draw_pile = [card for card in self.draw_pile if not condition(card)]
        removed = before - len(self.draw_pile)
        logger.debug(f"Filtered {removed} cards from draw pile")
        return removed

    def draw_card(self) -> Optional[Card]:
        """Pop the top card of the draw pile, or None if it is empty."""
        if not self.draw_pile:
            return None
        return self.draw_pile.pop()

    def fill_room(self) -> int:
        """Draw until the room is full or the draw pile runs out.

        Returns:
            Number of cards drawn
        """
        drawn = 0
        while len(self.table_pile) < self.room_size:
            card = self.draw_card()
            if card is None:
                break
            self.table_pile.append(card)
            drawn += 1
        return drawn

    def discard_player_hand(self) -> None:
        """Move the weapon and every monster slain with it to the discard pile."""
        self.discard_pile.extend(self.player_hand)
        self.player_hand.clear()

    def equip_weapon(self, card: Card) -> None:
        """Replace whatever is in hand with card."""
        self.discard_player_hand()
        self.player_hand.append(card)
        logger.debug(f"Equipped {card}")

    def equip_from_room(self, index: int) -> bool:
        """Take room card at index and equip it as the weapon."""
        card = self._take_from_room(index)
        if card is None:
            return False
        self.equip_weapon(card)
        return True

    def attack_with_weapon(self, index: int) -> bool:
        """Fight room card at index with the equipped weapon.

        The slain card stacks behind the weapon in hand. Damage is the
        amount by which the monster outranks the weapon, never negative.
        """
        weapon = self.weapon
        if weapon is None or not self._valid_room_index(index):
            return False

        target = self.table_pile.pop(index)
        self.player_hand.append(target)
        damage = max(0, target.value - weapon.value)
        self._take_damage(damage)
        logger.debug(f"{weapon} hits {target}: {damage} damage, {self.player_hp}hp left")
        return True

    def attack_no_weapon(self, index: int) -> bool:
        """Fight room card at index bare-handed, taking its full value as damage."""
        target = self._take_from_room(index)
        if target is None:
            return False

        self.discard_pile.append(target)
        self._take_damage(target.value)
        logger.debug(f"Fought {target} bare-handed, {self.player_hp}hp left")
        return True

    def heal(self, index: int) -> bool:
        """Consume room card at index, gaining its value in hp (no cap)."""
        card = self._take_from_room(index)
        if card is None:
            return False

        self.player_hp += card.value
        self.discard_pile.append(card)
        logger.debug(f"Healed {card.value} with {card}, {self.player_hp}hp")
        return True

    def discard_from_room(self, index: int) -> bool:
        """Throw room card at index away with no other effect."""
        card = self._take_from_room(index)
        if card is None:
            return False

        self.discard_pile.append(card)
        return True

    def flee(self) -> int:
        """Run from the room.

        The room is shuffled and up to room_size of its cards go under the
        draw pile, then the room is refilled from the top.

        Returns:
            Number of cards sent back to the draw pile
        """
        self.rng.shuffle(self.table_pile)
        moved = 0
        for _ in range(self.room_size):
            if not self.table_pile:
                break
            self.draw_pile.insert(0, self.table_pile.pop())
            moved += 1
        self.fill_room()
        logger.debug(f"Fled, {moved} cards returned to draw pile")
        return moved

    # Read-only views for rendering

    @property
    def weapon(self) -> Optional[Card]:
        """The equipped weapon is the first card in hand."""
        return self.player_hand[0] if self.player_hand else None

    @property
    def room(self) -> tuple[Card, ...]:
        return tuple(self.table_pile)

    @property
    def hand(self) -> tuple[Card, ...]:
        return tuple(self.player_hand)

    @property
    def discard(self) -> tuple[Card, ...]:
        return tuple(self.discard_pile)

    @property
    def draw_count(self) -> int:
        return len(self.draw_pile)

    def total_cards(self) -> int:
        """Cards across all four piles."""
        return (
            len(self.draw_pile)
            + len(self.table_pile)
            + len(self.discard_pile)
            + len(self.player_hand)
        )

    def _valid_room_index(self, index: int) -> bool:
        return 0 <= index < len(self.table_pile)

    def _take_from_room(self, index: int) -> Optional[Card]:
        if not self._valid_room_index(index):
            return None
        return self.table_pile.pop(index)

    def _take_damage(self, amount: int) -> None:
        self.player_hp = max(0, self.player_hp - amount)
