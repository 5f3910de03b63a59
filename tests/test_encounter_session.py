import pytest
from rpsadventure.battle.models import Enemy, Move, OutcomeKind, Player
from rpsadventure.battle.session import EncounterSession, EncounterState
from rpsadventure.battle.validation import accept_move
from rpsadventure.core.errors import EncounterFinishedError


class DummyRng:
    """Always lands in the scissors band for any bias below 1."""
    def __init__(self, value=0.999): self.value = value
    def random(self): return self.value


def test_goblin_falls_to_dynamite():
    player = Player()
    goblin = Enemy("Goblin", 20, 0.6)
    session = EncounterSession(player, goblin, DummyRng(0.0))

    record = session.step(accept_move("dynamite", player))

    assert record.outcome.kind is OutcomeKind.DYNAMITE_HIT
    assert goblin.hp == -5
    assert session.state is EncounterState.ENEMY_DEFEATED
    assert player.wins == 1
    assert player.hp == 50
    assert player.dynamite == 1

    # the second stick goes to the next foe
    wizard = Enemy("Wizard", 30, 0.4)
    nxt = EncounterSession(player, wizard, DummyRng(0.0))
    nxt.step(accept_move("dynamite", player))
    assert wizard.hp == 5
    assert player.dynamite == 0
    assert nxt.state is EncounterState.IN_PROGRESS


def test_always_rock_beats_forced_scissors_every_turn():
    player = Player()
    goblin = Enemy("Goblin", 20, 0.6)
    session = EncounterSession(player, goblin, DummyRng())
    state = session.run(lambda p, e: Move.ROCK)
    assert state is EncounterState.ENEMY_DEFEATED
    assert session.turn_counter == 2
    assert all(t.enemy_move is Move.SCISSORS for t in session.turns)
    assert all(t.outcome.damage == 10 for t in session.turns)
    assert [t.enemy_hp for t in session.turns] == [10, 0]
    assert player.hp == 50


def test_tie_turn_keeps_encounter_going():
    player = Player()
    goblin = Enemy("Goblin", 20, 0.6)
    session = EncounterSession(player, goblin, DummyRng(0.0))  # rock
    record = session.step(Move.ROCK)
    assert record.outcome.kind is OutcomeKind.TIE
    assert (player.hp, goblin.hp) == (50, 20)
    assert record.state is EncounterState.IN_PROGRESS
    assert "It's a tie! No damage!" in session.log


def test_player_defeat_ends_encounter():
    player = Player(hp=8)
    goblin = Enemy("Goblin", 20, 0.6)
    session = EncounterSession(player, goblin, DummyRng())  # scissors cuts paper
    session.step(Move.PAPER)
    assert player.hp == 0
    assert session.state is EncounterState.PLAYER_DEFEATED
    assert player.wins == 0
    with pytest.raises(EncounterFinishedError):
        session.step(Move.ROCK)


def test_victory_heals_and_counts_win():
    player = Player(hp=10)
    enemy = Enemy("Wizard", 10, 0.4)
    session = EncounterSession(player, enemy, DummyRng())
    session.step(Move.ROCK)
    assert session.state is EncounterState.ENEMY_DEFEATED
    assert player.hp == 25
    assert player.wins == 1
    assert "Victory! You defeated the Wizard!" in session.log


def test_messages_forwarded_with_kinds():
    seen = []
    player = Player()
    session = EncounterSession(player, Enemy("Goblin", 20, 0.6), DummyRng(),
                               message_cb=lambda text, kind: seen.append((kind, text)))
    session.announce()
    session.step(accept_move("dynamite", player))
    assert ("banner", "A wild Goblin appears!") in seen
    assert ("dynamite", "BOOM! Dynamite used!") in seen
    assert ("info", "Goblin chose: scissors") in seen
    assert ("hit", "Dynamite deals 25 damage to Goblin!") in seen
    assert [text for _, text in seen] == session.log
