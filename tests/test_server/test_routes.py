"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from minipoker.server.app import app
from minipoker.server.websocket import room_manager


@pytest.fixture
def client():
    """Test client with no rooms left over from other tests."""
    room_manager.rooms.clear()
    yield TestClient(app)
    room_manager.rooms.clear()


@pytest.fixture
def table(client):
    """Client with an initialized, seeded table."""
    response = client.post("/init_round", json={"seed": 3})
    assert response.status_code == 200
    return client


class TestInitRound:
    """Tests for table setup."""

    def test_state_before_init(self, client):
        response = client.get("/state")
        assert response.status_code == 400

    def test_action_before_init(self, client):
        assert client.post("/draw").status_code == 400

    def test_init_defaults(self, client):
        response = client.post("/init_round", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["num_opponents"] == 3
        public = data["state"]["public_info"]
        assert public["phase"] == "IDLE"
        assert public["player_money"] == 1000
        assert public["computer_money"] == 3000

    def test_init_validation(self, client):
        assert client.post("/init_round", json={"num_opponents": 9}).status_code == 422
        assert client.post("/init_round", json={"bet_increment": 0}).status_code == 422
        assert client.post("/init_round", json={"evaluation": "FUZZY"}).status_code == 422

    def test_reset_round(self, table):
        assert table.post("/reset_round").status_code == 200
        assert table.get("/state").status_code == 400


class TestRoundFlow:
    """Tests for playing a round over HTTP."""

    def test_draw(self, table):
        data = table.post("/draw").json()

        assert data["success"]
        assert data["action_type"] == "DRAW"
        public = data["state"]["public_info"]
        assert public["phase"] == "HOLE_CARDS_DEALT"
        assert len(data["state"]["private_info"]["hand"]) == 2
        assert all("cards" not in p for p in public["participants"][1:])

    def test_flop_without_bet_is_noop(self, table):
        table.post("/draw")
        data = table.post("/deal_flop").json()

        assert not data["success"]
        assert data["state"]["public_info"]["board"] == []

    def test_bet(self, table):
        table.post("/draw")
        data = table.post("/bet").json()

        assert data["success"]
        assert data["amount"] == 10
        public = data["state"]["public_info"]
        assert public["pot"] == 10
        assert public["player_money"] == 990
        assert public["computer_calling"]

    def test_bet_too_large(self, table):
        table.post("/draw")
        data = table.post("/bet", json={"amount": 5000}).json()

        assert not data["success"]
        public = data["state"]["public_info"]
        assert public["pot"] == 0
        assert public["player_money"] == 1000

    def test_full_round(self, table):
        table.post("/draw")
        table.post("/bet")
        table.post("/deal_flop")
        table.post("/deal_turn")
        data = table.post("/deal_river").json()

        assert data["success"]
        public = data["state"]["public_info"]
        assert public["river_dealt"]
        assert len(public["board"]) == 5
        assert public["winner_index"] in range(4)
        assert public["winner"]["amount"] == 10
        assert public["pot"] == 0
        assert all(len(p["cards"]) == 2 for p in public["participants"])
        assert public["player_money"] + public["computer_money"] == 4000

        winner = table.get("/winner").json()["winner"]
        assert winner["winner_index"] == public["winner_index"]

    def test_fold(self, table):
        table.post("/draw")
        table.post("/bet")
        data = table.post("/fold").json()

        assert data["success"]
        public = data["state"]["public_info"]
        assert public["pot"] == 0
        assert public["folded"]
        assert public["player_money"] == 990
        assert public["computer_money"] == 3000

    def test_take_action(self, table):
        data = table.post("/take_action", json={"action_type": "draw"}).json()
        assert data["success"]

        data = table.post("/take_action", json={"action_type": "BET", "amount": 25}).json()
        assert data["amount"] == 25

    def test_take_invalid_action(self, table):
        response = table.post("/take_action", json={"action_type": "SHUFFLE"})
        assert response.status_code == 400

    def test_reveal_query(self, table):
        table.post("/draw")
        public = table.get("/state", params={"reveal": "true"}).json()["public_info"]
        assert all("cards" in p for p in public["participants"])

    def test_winner_before_resolution(self, table):
        assert table.get("/winner").json() == {"winner": None}
