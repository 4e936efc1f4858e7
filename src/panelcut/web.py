#!/usr/bin/env python3
"""API 서버 실행 (uvicorn)"""


def run_server(host: str = "0.0.0.0", port: int = 8000, log_level: str = "INFO"):
    import uvicorn
    from .logging_setup import setup_logging
    from .web_app.server import app

    setup_logging(log_level)
    print(f"panelcut API 서버: http://{host}:{port}/api/optimize")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
