from fastapi import APIRouter

router = APIRouter(tags=["utils"])


@router.get("/", include_in_schema=False)
@router.get("/index", include_in_schema=False)
@router.get("/home", include_in_schema=False)
def index() -> str:
    return (
        "Welcome, in order to make an API call direct your browser or Postman "
        "to an endpoint."
    )


@router.get("/utils/health-check/")
def health_check() -> bool:
    return True
