import multiprocessing
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from di.di import DI
from util import log
from util.config import config
from util.errors import ServiceError, ValidationError


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(owner: FastAPI):
    process_name = multiprocessing.current_process().name
    worker_type = "main" if process_name == "MainProcess" else "worker"
    worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
    log.i(f"Lifecycle: Starting up {worker_info} on {config.network}")
    yield
    log.i(f"Lifecycle: {worker_info} stopped")


app = FastAPI(
    docs_url = None,
    redoc_url = None,
    title = "Gas Spend API",
    description = "Estimates the total gas an address has spent, in wei, ETH and USD.",
    debug = config.log_level in ["local", "trace", "debug"],
    lifespan = lifespan,
)

# noinspection PyTypeChecker
app.add_middleware(
    CORSMiddleware,
    allow_origins = ["*"],
    allow_credentials = False,
    allow_methods = ["*"],
    allow_headers = ["*"],
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": config.version}


@app.get("/api/calculateGas")
def calculate_gas(address: str | None = None) -> JSONResponse:
    try:
        response = DI().gas_summary_controller.compute_gas_summary(address)
        return JSONResponse(status_code = 200, content = response.model_dump(by_alias = True))
    except ValidationError as e:
        log.w(f"Rejected gas summary request: {e}")
        return JSONResponse(status_code = e.http_status, content = e.to_api_dict())
    except ServiceError as e:
        log.e("Failed to calculate gas cost", e)
        return JSONResponse(status_code = e.http_status, content = e.to_api_dict())
    except Exception as e:
        log.e("Failed to calculate gas cost", e)
        return JSONResponse(status_code = 500, content = {"error": str(e)})


def read_version(version_file: Path = Path("./.version")) -> str | None:
    if not version_file.exists():
        return None
    return version_file.read_text().strip() or None


# The main runner
if __name__ == "__main__":
    dev_mode = "--dev" in sys.argv
    if dev_mode:
        # reloaded workers re-read the environment
        os.environ["LOG_LEVEL"] = config.log_level = "debug"
    print(f"INFO:     Gas Spend API on {config.network}, {'dev' if dev_mode else 'production'} mode")
    if not config.alchemy_api_key.get_secret_value():
        print("WARN:     ALCHEMY_API_KEY is not set, every gas summary will fail", file = sys.stderr)
    if version_name := read_version():
        os.environ["VERSION"] = config.version = version_name
    else:
        print(f"WARN:     No release version found, reporting '{config.version}'", file = sys.stderr)

    uvicorn.run(
        "main:app",
        host = "0.0.0.0",
        port = config.port,
        log_level = "debug" if config.log_level == "local" else config.log_level,
        workers = 1 if dev_mode else 2,
        reload = dev_mode,
    )
