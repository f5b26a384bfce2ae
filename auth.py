from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from config.settings import get_app_config


security = HTTPBearer()


async def verify_admin_token(
    credentials: HTTPAuthorizationCredentials = Depends(security)
):
    """
    Verify the Bearer token against the ADMIN_API_SECRET environment variable
    """
    admin_api_secret = get_app_config()["admin_api_secret"]

    if not admin_api_secret:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="ADMIN_API_SECRET not configured"
        )

    if credentials.credentials != admin_api_secret:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin API secret",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return credentials.credentials
