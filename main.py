# main.py
import argparse
import threading
import traceback
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import ServerConfig
from martian_robots.entities.grid import MARS
from martian_robots.entities.robot import Robot, create
from martian_robots.entities.scents import DEFAULT_REGISTRY, LossRegistry
from martian_robots.utils.types import format_move

app = FastAPI(title="Martian Robots Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class RobotInput(BaseModel):
    x: Optional[int] = 0
    y: Optional[int] = 0
    heading: Optional[str] = "N"

class InstructionInput(BaseModel):
    instructions: str

class MovePoint(BaseModel):
    x: int
    y: int
    heading: str
    lost: bool

class RobotOutput(BaseModel):
    id: int
    result: str
    lost: bool

class RobotDetail(RobotOutput):
    history: List[MovePoint]

class ScentPoint(BaseModel):
    x: int
    y: int

class ScentsOutput(BaseModel):
    scents: List[ScentPoint]


# =============================================================================
# ROBOT STORE
# =============================================================================

class RobotStore:
    """
    Robots created through the API, keyed by an increasing integer id.
    Lives as long as the server process, same as the scent registry.
    """

    def __init__(self, registry: LossRegistry = DEFAULT_REGISTRY):
        self.registry = registry
        self._robots: Dict[int, Robot] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, options: dict) -> int:
        robot = create(options, registry=self.registry)
        with self._lock:
            robot_id = self._next_id
            self._robots[robot_id] = robot
            self._next_id += 1
        return robot_id

    def get(self, robot_id: int) -> Robot:
        with self._lock:
            robot = self._robots.get(robot_id)
        if robot is None:
            raise KeyError(robot_id)
        return robot

    def items(self):
        with self._lock:
            return list(self._robots.items())

    def clear(self) -> None:
        with self._lock:
            self._robots.clear()
            self._next_id = 1


store = RobotStore()


def summarize(robot_id: int, robot: Robot) -> dict:
    return {
        "id": robot_id,
        "result": format_move(robot.current),
        "lost": robot.lost,
    }


def get_robot_or_404(robot_id: int) -> Robot:
    try:
        return store.get(robot_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Robot {robot_id} not found")


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {
        "status": "ok",
        "message": "Martian robots server is running",
        "grid": MARS.get_dict(),
    }


@app.post("/robots", response_model=RobotOutput)
def create_robot(input_data: RobotInput):
    try:
        robot_id = store.add(input_data.model_dump(exclude_none=True))
        robot = store.get(robot_id)
        print(f"[RobotServer] Robot {robot_id} landed at {format_move(robot.current)}")
        return summarize(robot_id, robot)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/robots", response_model=List[RobotOutput])
def list_robots():
    return [summarize(robot_id, robot) for robot_id, robot in store.items()]


@app.get("/robots/{robot_id}", response_model=RobotDetail)
def get_robot(robot_id: int):
    robot = get_robot_or_404(robot_id)
    result = summarize(robot_id, robot)
    result["history"] = [move.get_dict() for move in robot.history]
    return result


@app.post("/robots/{robot_id}/instruct", response_model=RobotOutput)
def instruct_robot(robot_id: int, input_data: InstructionInput):
    """
    Run an instruction string on an existing robot.

    A robot that was already lost stays where it fell and keeps reporting
    the same LOST result. Moves blocked by another robot's scent are
    dropped silently by the robot; the server logs them for the operator.
    """
    robot = get_robot_or_404(robot_id)
    try:
        was_lost = robot.lost
        steps_before = len(robot.history)
        result = robot.instruct(input_data.instructions)

        if robot.lost and not was_lost:
            print(f"[RobotServer] Robot {robot_id} LOST at "
                  f"({robot.current.position.x}, {robot.current.position.y})")
        elif not robot.lost:
            skipped = len(input_data.instructions) - (len(robot.history) - steps_before)
            if skipped > 0:
                print(f"[RobotServer] Robot {robot_id}: {skipped} move(s) blocked by scent")

        return summarize(robot_id, robot)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/scents", response_model=ScentsOutput)
def list_scents():
    return {"scents": [p.get_dict() for p in store.registry.positions()]}


@app.delete("/scents", response_model=ScentsOutput)
def reset_scents():
    store.registry.reset()
    print("[RobotServer] Scent registry cleared")
    return {"scents": []}


def parse_args() -> argparse.Namespace:
    defaults = ServerConfig()
    parser = argparse.ArgumentParser(description="Martian Robots Server")
    parser.add_argument("--host", default=defaults.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=defaults.port, help="TCP port")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    config = ServerConfig(host=args.host, port=args.port)
    uvicorn.run(app, host=config.host, port=config.port)
