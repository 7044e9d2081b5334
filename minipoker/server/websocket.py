"""
WebSocket handling for real-time state updates.

This module provides:
- GameRoom: a round plus the sockets watching it
- RoomManager: creates and looks up rooms
- WebSocket endpoint: accepts actions and pushes state after each change
"""

from __future__ import annotations
from typing import Dict, Optional, Any
from dataclasses import dataclass, field
import logging
import random

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from minipoker.core.round import PokerRound
from minipoker.core.rules import ActionType, TableConfig
from minipoker.server.schemas import WSActionMessage, WSErrorMessage, WSJoinMessage


logger = logging.getLogger(__name__)

DEFAULT_ROOM = "main"


def error_message(text: str) -> Dict[str, Any]:
    """Build an error frame for a client."""
    return WSErrorMessage(message=text).model_dump()


@dataclass
class GameRoom:
    """A room with its round and connected clients."""
    room_id: str
    game: PokerRound
    connections: Dict[str, WebSocket] = field(default_factory=dict)
    _changed: bool = False

    def __post_init__(self) -> None:
        self.game.subscribe(self._mark_changed)

    def _mark_changed(self, game: PokerRound) -> None:
        self._changed = True

    async def broadcast(self, message: Dict[str, Any], exclude: Optional[str] = None):
        """Broadcast a message to all connected clients."""
        for client_id, ws in list(self.connections.items()):
            if client_id != exclude:
                try:
                    await ws.send_json(message)
                except (RuntimeError, WebSocketDisconnect) as e:
                    logger.error(f"Error sending to {client_id}: {e}")

    async def flush(self) -> None:
        """Push the state to every client if the round changed since the last push."""
        if not self._changed:
            return
        self._changed = False

        await self.broadcast({"type": "state", **self.game.get_state()})
        if self.game.result is not None:
            await self.broadcast({"type": "result", **self.game.get_winner()})


class RoomManager:
    """
    Manages game rooms.

    Usage:
        manager = RoomManager()
        room = manager.create_room(DEFAULT_ROOM, TableConfig(), seed=7)
        result = room.game.draw()
        await room.flush()
    """

    def __init__(self):
        self.rooms: Dict[str, GameRoom] = {}

    def create_room(
        self,
        room_id: str,
        config: Optional[TableConfig] = None,
        seed: Optional[int] = None,
    ) -> GameRoom:
        """Create a room, replacing any room with the same id."""
        rng = random.Random(seed) if seed is not None else None
        game = PokerRound(config=config, rng=rng)

        previous = self.rooms.get(room_id)
        room = GameRoom(room_id=room_id, game=game)
        if previous is not None:
            room.connections = previous.connections
        self.rooms[room_id] = room

        logger.info(f"Created room {room_id} with {game.config.num_opponents} opponents")
        return room

    def get_room(self, room_id: str) -> Optional[GameRoom]:
        """Get a room by ID."""
        return self.rooms.get(room_id)

    def remove_room(self, room_id: str) -> None:
        self.rooms.pop(room_id, None)

    def attach(self, room_id: str, client_id: str, websocket: WebSocket) -> GameRoom:
        """
        Return the current room for room_id with the client registered in it.

        Rooms are replaced by /init_round and removed by /reset_round, so a
        connected client must look its room up again for every message.
        """
        room = self.get_room(room_id)
        if room is None:
            room = self.create_room(room_id)
        room.connections[client_id] = websocket
        return room

    async def handle_message(self, room: GameRoom, message: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle a message from a client.

        Returns:
            Response dict sent back to the sender
        """
        if not isinstance(message, dict):
            return error_message("Messages must be JSON objects")

        msg_type = message.get("type", "")

        if msg_type == "action":
            return await self._handle_action(room, message)
        elif msg_type == "get_state":
            return {"type": "state", **room.game.get_state()}
        else:
            return error_message(f"Unknown message type: {msg_type}")

    async def _handle_action(self, room: GameRoom, message: Dict[str, Any]) -> Dict[str, Any]:
        """Handle a round action from a client."""
        try:
            msg = WSActionMessage(**message)
            action_type = ActionType(msg.action.upper())
        except (ValidationError, ValueError):
            return error_message(f"Invalid action: {message.get('action')}")

        result = room.game.take_action(action_type, msg.amount or 0)
        await room.flush()

        return {
            "type": "action_result",
            "success": result.success,
            "message": result.message,
            "action": action_type.value,
            "amount": result.amount,
        }


# Global room manager instance
room_manager = RoomManager()


async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for round communication.

    Protocol:
    1. Client connects and sends: {"type": "join", "room_id": "...", "client_id": "..."}
    2. Server sends the round state
    3. Client sends actions: {"type": "action", "action": "BET", "amount": 10}
    4. Server pushes state (and result) messages after every change
    """
    room_id: Optional[str] = None
    client_id: Optional[str] = None

    await websocket.accept()
    try:
        try:
            join: Optional[WSJoinMessage] = WSJoinMessage(**await websocket.receive_json())
        except (TypeError, ValueError):
            join = None

        if join is None or join.type != "join":
            await websocket.send_json(
                error_message("First message must be join with room_id and client_id")
            )
            await websocket.close()
            return

        room_id, client_id = join.room_id, join.client_id
        room = room_manager.attach(room_id, client_id, websocket)
        logger.info(f"Client {client_id} joined {room_id}")

        await websocket.send_json({"type": "state", **room.game.get_state()})

        while True:
            try:
                message = await websocket.receive_json()
            except ValueError as e:
                logger.warning(f"Unreadable message from {client_id}: {e}")
                await websocket.send_json(error_message("Messages must be valid JSON"))
                continue

            room = room_manager.attach(room_id, client_id, websocket)
            response = await room_manager.handle_message(room, message)
            await websocket.send_json(response)

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected: {client_id}")
    finally:
        room = room_manager.get_room(room_id) if room_id is not None else None
        if room is not None and client_id is not None:
            room.connections.pop(client_id, None)
