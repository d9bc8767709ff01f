"""Console entry point that serves the app with uvicorn."""

import os

import uvicorn


def run():
    """Serve ``app.main:app`` on ``HOST``/``PORT`` (default 0.0.0.0:8000)."""
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,
    )


if __name__ == "__main__":
    run()
