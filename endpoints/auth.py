from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from dependencies import get_auth_service, get_current_session
from logic.errors import AuthenticationError
from logic.session import AuthService, UserSession

router = APIRouter(prefix="/auth", tags=["Auth"])

class LoginRequest(BaseModel):
    email: str
    password: str

class ForgotPasswordRequest(BaseModel):
    email: str

class ResetPasswordRequest(BaseModel):
    token: str
    password: str

def session_response(session: UserSession) -> dict:
    return {"user": session.user.model_dump(), "is_admin": session.is_admin}

@router.post("/login", status_code=200) #async because login waits out the simulated network delay
async def login(login_data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    try:
        session = await auth.login(login_data.email, login_data.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return session_response(session)

@router.post("/logout", status_code=200)
def logout(auth: AuthService = Depends(get_auth_service)):
    auth.logout()
    return {"message": "Logged out"}

@router.get("/me", status_code=200)
def current_user(session: UserSession = Depends(get_current_session)):
    return session_response(session)

@router.post("/forgot-password", status_code=200)
async def forgot_password(request_data: ForgotPasswordRequest, auth: AuthService = Depends(get_auth_service)):
    try:
        await auth.forgot_password(request_data.email)
    except AuthenticationError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Password reset email sent to {request_data.email}"}

@router.post("/reset-password", status_code=200)
async def reset_password(request_data: ResetPasswordRequest, auth: AuthService = Depends(get_auth_service)):
    try:
        await auth.reset_password(request_data.token, request_data.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Password reset successful"}
