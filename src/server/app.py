from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from dataclasses import asdict
from typing import List, Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

from simulation import CarConstraints, Clock, ElevatorController, RegistrationClosedError

logger = logging.getLogger(__name__)


class PassengerRequest(BaseModel):
    origin: int = Field(ge=0)
    destination: int = Field(ge=0)

    @model_validator(mode="after")
    def check_distinct_floors(self) -> "PassengerRequest":
        if self.origin == self.destination:
            raise ValueError("destination must differ from origin")
        return self


class PassengerBatch(BaseModel):
    passengers: List[PassengerRequest] = Field(min_length=1, max_length=20)


class ResetRequest(BaseModel):
    start_floor: int = 0


class SimulationManager:
    def __init__(
        self,
        start_floor: int = 0,
        constraints: Optional[CarConstraints] = None,
        clock: Optional[Clock] = None,
        broadcast_interval: float = 0.25,
    ) -> None:
        self.constraints = constraints or CarConstraints()
        self.clock = clock
        self.broadcast_interval = broadcast_interval
        self.controller = self._build_controller(start_floor)
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    def _build_controller(self, start_floor: int) -> ElevatorController:
        return ElevatorController(start_floor=start_floor, constraints=self.constraints, clock=self.clock)

    async def start(self) -> dict:
        async with self._lock:
            self.controller.start()
            if self._task is None:
                self._task = asyncio.create_task(self._run())
            return self.current_state()

    async def stop(self) -> dict:
        self.controller.stop()
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        return self.current_state()

    async def reset(self, start_floor: int) -> dict:
        await self.stop()
        async with self._lock:
            self.controller = self._build_controller(start_floor)
            logger.info("Simulation reset with the car at floor %d", start_floor)
            return self.current_state()

    async def register_batch(self, passengers: List[PassengerRequest]) -> dict:
        async with self._lock:
            # Check the whole batch first so a bad entry registers nobody.
            for request in passengers:
                self.constraints.validate_floor(request.origin)
                self.constraints.validate_floor(request.destination)
            registered = [
                self.controller.register(request.origin, request.destination).passenger_id
                for request in passengers
            ]
            state = self.current_state()
            state["registered"] = registered
            return state

    async def _run(self) -> None:
        while self.controller.is_running:
            await self.broadcast(self.current_state())
            await asyncio.sleep(self.broadcast_interval)
        await self.broadcast(self.current_state())

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        snapshot = self.controller.snapshot()
        return {
            "status": snapshot.to_dict(),
            "metrics": asdict(self.controller.metrics.snapshot(snapshot.tick)),
            "started": self.controller.started,
            "running": self.controller.is_running,
            "complete": self.controller.is_complete(),
        }


manager = SimulationManager()
app = FastAPI(title="scanlift Elevator API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/passengers")
async def register_passengers(batch: PassengerBatch) -> dict:
    try:
        return await manager.register_batch(batch.passengers)
    except RegistrationClosedError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/start")
async def start_simulation() -> dict:
    try:
        return await manager.start()
    except RuntimeError as exc:
        raise HTTPException(status_code=409, detail=str(exc))


@app.post("/stop")
async def stop_simulation() -> dict:
    return await manager.stop()


@app.post("/reset")
async def reset_simulation(request: ResetRequest) -> dict:
    try:
        return await manager.reset(request.start_floor)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
