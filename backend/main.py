"""Application entry point bootstrapping the microkernel and the meetings plugin."""

from __future__ import annotations

import os

from fastapi import FastAPI

from kernel import Kernel
from services.meetings_service.plugin import MeetingsPlugin


def _env_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.lower() in {"1", "true", "yes", "on"}


def create_kernel() -> Kernel:
    debug = _env_flag(os.getenv("DEBUG"))
    kernel = Kernel(debug=debug)
    kernel.register_plugin(MeetingsPlugin())
    return kernel


kernel = create_kernel()
app: FastAPI = kernel.app


@app.get("/api/")
def root():
    return {"message": "Meetings API is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
