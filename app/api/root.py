from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root():
    """Service descriptor with the mounted API prefixes."""
    return {
        "name": "Funcionarios Backend",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "api": {
            "auth": "/api/auth",
            "funcionarios": "/api/funcionarios",
        },
    }
