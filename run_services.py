import asyncio
import logging
import uvicorn

logger = logging.getLogger(__name__)


async def start_servers():
    # Auth service
    auth_config = uvicorn.Config(
        "auth_service.app.main:app",
        host="0.0.0.0",
        port=8001,
        reload=False,
    )
    auth_server = uvicorn.Server(auth_config)

    # Pantry service
    pantry_config = uvicorn.Config(
        "pantry_service.app.main:app",
        host="0.0.0.0",
        port=8002,
        reload=False,
    )
    pantry_server = uvicorn.Server(pantry_config)

    # Run both servers concurrently
    await asyncio.gather(
        auth_server.serve(),
        pantry_server.serve(),
    )


def main():
    try:
        asyncio.run(start_servers())
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")


if __name__ == "__main__":
    main()
