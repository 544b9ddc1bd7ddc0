from fastapi import FastAPI

from api.router import api_router
from server.lifespan import lifespan

handler = FastAPI(lifespan=lifespan)
handler.include_router(api_router)
