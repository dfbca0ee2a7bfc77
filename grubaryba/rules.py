"""
Field effects and the buy/sell negotiation between the engine and players.

`FieldRules` is the only place that changes cash on behalf of the board and
the only place that changes property ownership.
"""

import logging
from typing import Any, Dict, List, Optional

from grubaryba.board import Board
from grubaryba.config import GameSettings
from grubaryba.events import EventLog, EventType
from grubaryba.fields import Field, FieldType
from grubaryba.player import Player, PlayerStatus
from grubaryba.properties import Property

logger = logging.getLogger(__name__)


class FieldRules:
    """Applies pass-by and step-on effects of fields to players."""

    def __init__(
        self,
        players: List[Player],
        board: Board,
        settings: GameSettings,
        event_log: EventLog,
    ):
        self.players = players
        self.board = board
        self.settings = settings
        self.event_log = event_log
        self.properties: Dict[str, Property] = {p.name: p for p in board.properties()}

    # === FIELD EFFECTS ===

    def on_pass_by(self, player: Player, field: Field) -> None:
        """Apply the effect of `player` walking through `field`."""
        if player.is_bankrupt:
            return

        self.event_log.log(EventType.PASS_BY, player.player_id, field=field.name)

        if field.field_type == FieldType.REWARD and field.reward_on_pass:
            self._reward(player, field)
        elif field.field_type == FieldType.DEPOSIT:
            paid = self.charge(
                player,
                field.amount,
                event_type=EventType.DEPOSIT_PAYMENT,
                field=field.name,
            )
            if paid:
                field.pool += field.amount

    def on_step_on(self, player: Player, field: Field) -> None:
        """Apply the effect of `player` ending its move on `field`."""
        if player.is_bankrupt:
            return

        if field.field_type == FieldType.NO_OP:
            return
        if field.field_type == FieldType.PROPERTY:
            prop = field.property
            if not prop.is_owned():
                self.offer_purchase(player, prop)
            elif prop.owner_id != player.player_id:
                self.collect_commission(player, prop)
        elif field.field_type == FieldType.REWARD:
            self._reward(player, field)
        elif field.field_type == FieldType.PUNISHMENT:
            self.charge(player, field.amount, event_type=EventType.FEE_PAYMENT, field=field.name)
        elif field.field_type == FieldType.DEPOSIT:
            self._collect_deposit(player, field)
        elif field.field_type == FieldType.AQUARIUM:
            player.waiting_turns = field.amount
            logger.debug(f"{player.name} stuck in {field.name} for {field.amount} turns")
        else:
            raise ValueError(f"Unknown field type: {field.field_type!r}")

    def _reward(self, player: Player, field: Field) -> None:
        player.earn(field.amount)
        self.event_log.log(
            EventType.REWARD,
            player.player_id,
            field=field.name,
            amount=field.amount,
            new_balance=player.cash,
        )

    def _collect_deposit(self, player: Player, field: Field) -> None:
        amount = field.pool
        player.earn(amount)
        field.pool = 0
        self.event_log.log(
            EventType.DEPOSIT_COLLECT,
            player.player_id,
            field=field.name,
            amount=amount,
            new_balance=player.cash,
        )

    # === PURCHASE AND COMMISSION ===

    def offer_purchase(self, player: Player, prop: Property) -> bool:
        """
        Offer an unowned property to the player who landed on it.

        A player short of cash is asked to sell properties first; when that
        still does not cover the price the purchase is abandoned.

        Returns:
            True if the player bought the property
        """
        if not player.want_buy(prop.name):
            self.event_log.log(EventType.PURCHASE_DECLINED, player.player_id, property=prop.name)
            return False

        if not player.can_afford(prop.price) and not self.raise_funds(player, prop.price):
            self.event_log.log(
                EventType.PURCHASE_ABANDONED,
                player.player_id,
                property=prop.name,
                price=prop.price,
                cash=player.cash,
            )
            logger.debug(f"{player.name} cannot afford {prop.name} ({prop.price}), purchase abandoned")
            return False

        player.pay(prop.price)
        self.assign(player, prop)
        self.event_log.log(
            EventType.PURCHASE,
            player.player_id,
            property=prop.name,
            price=prop.price,
            new_balance=player.cash,
        )
        logger.debug(f"{player.name} bought {prop.name} for {prop.price}")
        return True

    def collect_commission(self, player: Player, prop: Property) -> bool:
        """Make `player` pay the commission on `prop` to its owner."""
        owner = self.players[prop.owner_id]
        return self.charge(
            player,
            prop.commission,
            creditor=owner,
            event_type=EventType.COMMISSION_PAYMENT,
            property=prop.name,
        )

    def charge(
        self,
        player: Player,
        amount: int,
        creditor: Optional[Player] = None,
        event_type: EventType = EventType.FEE_PAYMENT,
        **details: Any,
    ) -> bool:
        """
        Collect an obligatory payment.

        Runs the shortfall protocol when cash is insufficient and declares the
        player bankrupt if that does not help. Money goes to `creditor` when
        given, otherwise to the bank.

        Returns:
            True if paid, False if the player went bankrupt instead
        """
        if not player.can_afford(amount) and not self.raise_funds(player, amount):
            self.declare_bankruptcy(player, creditor, amount_owed=amount)
            return False

        player.pay(amount)
        if creditor is not None:
            creditor.earn(amount)

        self.event_log.log(
            event_type,
            player.player_id,
            amount=amount,
            creditor=creditor.player_id if creditor is not None else None,
            new_balance=player.cash,
            **details,
        )
        return True

    # === SHORTFALL AND BANKRUPTCY ===

    def raise_funds(self, player: Player, amount: int) -> bool:
        """
        Offer every owned property for sale to cover `amount`.

        All properties are offered, in holding order, even after enough cash
        has been raised.

        Returns:
            True if the player can now pay `amount`
        """
        for name in list(player.properties):
            if player.want_sell(name):
                self.sell(player, self.properties[name])
        return player.can_afford(amount)

    def sell(self, player: Player, prop: Property) -> int:
        """Sell `prop` back to the bank. Returns the proceeds."""
        proceeds = prop.sale_value(self.settings.sale_ratio)
        self.release(player, prop)
        player.earn(proceeds)
        self.event_log.log(
            EventType.SALE,
            player.player_id,
            property=prop.name,
            proceeds=proceeds,
            new_balance=player.cash,
        )
        return proceeds

    def declare_bankruptcy(
        self,
        player: Player,
        creditor: Optional[Player] = None,
        amount_owed: int = 0,
    ) -> None:
        """
        Take the player out of the game.

        Remaining properties return to the bank; the creditor gets nothing and
        the player's cash stays as it is.
        """
        released = list(player.properties)
        for name in released:
            self.release(player, self.properties[name])

        player.status = PlayerStatus.BANKRUPT
        player.waiting_turns = 0

        self.event_log.log(
            EventType.BANKRUPTCY,
            player.player_id,
            creditor=creditor.player_id if creditor is not None else None,
            amount_owed=amount_owed,
            properties=released,
            cash=player.cash,
        )
        logger.info(f"{player.name} went bankrupt owing {amount_owed}")

    # === OWNERSHIP ===

    def assign(self, player: Player, prop: Property) -> None:
        """Give `prop` to `player`."""
        prop.take_over(player.player_id)
        if prop.name not in player.properties:
            player.properties.append(prop.name)

    def release(self, player: Player, prop: Property) -> None:
        """Take `prop` away from `player` and return it to the bank."""
        prop.release()
        if prop.name in player.properties:
            player.properties.remove(prop.name)
