"""
HTTP API Routes for minipoker.

Each round action has its own endpoint and answers with the ActionResult
plus the resulting state. Clients watching the room over WebSocket are
pushed the new state as well.
"""

from typing import Dict, Any, Optional
from fastapi import APIRouter, HTTPException

from minipoker.core.round import ActionResult
from minipoker.core.rules import ActionType, TableConfig
from minipoker.server.schemas import (
    InitRoundRequest, BetRequest, ActionRequest,
    ActionResultSchema, RoundStateSchema,
)
from minipoker.server.websocket import DEFAULT_ROOM, GameRoom, room_manager

router = APIRouter()


def get_room() -> GameRoom:
    """Get the room served over HTTP."""
    room = room_manager.get_room(DEFAULT_ROOM)
    if room is None:
        raise HTTPException(status_code=400, detail="Round not initialized")
    return room


async def _respond(room: GameRoom, result: ActionResult) -> Dict[str, Any]:
    await room.flush()
    return {
        "success": result.success,
        "message": result.message,
        "action_type": result.action_type.value if result.action_type else None,
        "amount": result.amount,
        "state": room.game.get_state(),
    }


@router.post("/init_round")
async def init_round(req: InitRoundRequest) -> Dict[str, Any]:
    """
    Set up the table with fresh balances.

    Replaces any round already in progress.
    """
    try:
        config = TableConfig(
            starting_money=req.starting_money,
            bet_increment=req.bet_increment,
            num_opponents=req.num_opponents,
            evaluation=req.evaluation,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    room = room_manager.create_room(DEFAULT_ROOM, config, seed=req.seed)
    return {
        "success": True,
        "message": f"Table initialized with {req.num_opponents} opponents",
        "num_opponents": req.num_opponents,
        "state": room.game.get_state(),
    }


@router.get("/state", response_model=RoundStateSchema)
async def get_round_state(reveal: Optional[bool] = None) -> Dict[str, Any]:
    """
    Get the round state.

    Opponent cards are hidden until the river unless reveal=true.
    """
    return get_room().game.get_state(reveal=reveal)


@router.post("/draw", response_model=ActionResultSchema)
async def draw() -> Dict[str, Any]:
    """Start a round and deal hole cards."""
    room = get_room()
    return await _respond(room, room.game.draw())


@router.post("/bet", response_model=ActionResultSchema)
async def bet(req: Optional[BetRequest] = None) -> Dict[str, Any]:
    """Place a bet (the table increment by default)."""
    room = get_room()
    amount = req.amount if req is not None else 0
    return await _respond(room, room.game.bet(amount or None))


@router.post("/fold", response_model=ActionResultSchema)
async def fold() -> Dict[str, Any]:
    """Forfeit the round."""
    room = get_room()
    return await _respond(room, room.game.fold())


@router.post("/deal_flop", response_model=ActionResultSchema)
async def deal_flop() -> Dict[str, Any]:
    room = get_room()
    return await _respond(room, room.game.deal_flop())


@router.post("/deal_turn", response_model=ActionResultSchema)
async def deal_turn() -> Dict[str, Any]:
    room = get_room()
    return await _respond(room, room.game.deal_turn())


@router.post("/deal_river", response_model=ActionResultSchema)
async def deal_river() -> Dict[str, Any]:
    """Deal the river and resolve the round."""
    room = get_room()
    return await _respond(room, room.game.deal_river())


@router.post("/take_action", response_model=ActionResultSchema)
async def take_action(req: ActionRequest) -> Dict[str, Any]:
    """Take any round action by name."""
    room = get_room()

    try:
        action_type = ActionType(req.action_type.upper())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid action type: {req.action_type}")

    return await _respond(room, room.game.take_action(action_type, req.amount or 0))


@router.get("/winner")
async def get_winner() -> Dict[str, Any]:
    """Get the winner of the resolved round, if any."""
    return {"winner": get_room().game.get_winner() or None}


@router.post("/reset_round")
async def reset_round() -> Dict[str, Any]:
    """
    Discard the table (for development/testing).
    """
    room_manager.remove_room(DEFAULT_ROOM)
    return {"success": True, "message": "Round reset"}
