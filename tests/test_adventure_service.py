from datetime import datetime
from rpsadventure.battle.models import Enemy, Move, Player, make_roster
from rpsadventure.battle.service import AdventureService
from rpsadventure.battle.validation import accept_move
from rpsadventure.system.results import ResultsLog


class DummyRng:
    def __init__(self, value=0.999): self.value = value
    def random(self): return self.value


class MemorySink:
    def __init__(self): self.calls = []
    def record(self, player_name, wins, final_hp, won, timestamp):
        self.calls.append((player_name, wins, final_hp, won, timestamp))
        return True


FIXED_NOW = datetime(2026, 10, 19, 12, 30, 0)


def test_full_victory_reports_once():
    sink = MemorySink()
    service = AdventureService(Player(), sink, rng=DummyRng(), clock=lambda: FIXED_NOW)
    result = service.run(lambda p, e: Move.ROCK)
    assert result["outcome"] == "PLAYER_WIN"
    assert result["wins"] == 3
    assert result["final_hp"] == 50
    assert result["enemies_faced"] == ["Goblin", "Wizard", "Dark Lord"]
    assert [s.turn_counter for s in service.sessions] == [2, 3, 4]
    assert sink.calls == [("Adventurer", 3, 50, True, FIXED_NOW)]


def test_defeat_stops_run_and_reports_once():
    sink = MemorySink()
    service = AdventureService(Player(name="Pat"), sink, rng=DummyRng(), clock=lambda: FIXED_NOW)
    result = service.run(lambda p, e: Move.PAPER)
    # 8 damage a turn: 50 -> -6 after seven turns against the Goblin
    assert result["outcome"] == "PLAYER_LOSS"
    assert result["enemies_faced"] == ["Goblin"]
    assert result["final_hp"] == -6
    assert sink.calls == [("Pat", 0, -6, False, FIXED_NOW)]


def test_dynamite_opening_then_rock():
    player = Player()
    sink = MemorySink()

    def moves(p, e):
        if p.dynamite:
            return accept_move("dynamite", p)
        return accept_move("rock", p)

    result = AdventureService(player, sink, rng=DummyRng()).run(moves)
    assert result["outcome"] == "PLAYER_WIN"
    assert result["dynamite_left"] == 0
    assert player.wins == 3


def test_custom_roster():
    roster = [Enemy("Rat", 5, 0.0)]
    sink = MemorySink()
    result = AdventureService(Player(), sink, roster=roster, rng=DummyRng()).run(lambda p, e: Move.ROCK)
    assert result["enemies_faced"] == ["Rat"]
    assert result["wins"] == 1


def test_run_messages_include_banners():
    seen = []
    AdventureService(Player(), MemorySink(), rng=DummyRng(),
                     message_cb=lambda text, kind: seen.append(text)).run(lambda p, e: Move.ROCK)
    assert seen[0] == "Welcome to Rock-Paper-Scissors Adventure!"
    assert "A wild Dark Lord appears!" in seen
    assert seen[-1] == "You saved the land! Wins: 3"


def test_write_failure_does_not_change_outcome(tmp_path):
    notes = []
    sink = ResultsLog(tmp_path / "missing" / "results.txt", notify=lambda text, kind: notes.append((kind, text)))
    result = AdventureService(Player(), sink, rng=DummyRng()).run(lambda p, e: Move.ROCK)
    assert result["outcome"] == "PLAYER_WIN"
    assert notes and notes[0][0] == "error"
    assert notes[0][1].startswith("Error saving results:")


def test_default_roster_used_when_none_given():
    service = AdventureService(Player(), MemorySink())
    assert [e.name for e in service.roster] == [e.name for e in make_roster()]
