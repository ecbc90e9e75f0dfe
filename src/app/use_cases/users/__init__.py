"""Member account use cases"""
from .sign_up_user import SignUpUser
from .get_user import GetUser
from .set_user_ban import SetUserBan
from .dtos import SignUpCommandDTO, SetUserBanCommandDTO, UserResponseDTO

__all__ = [
    "SignUpUser",
    "GetUser",
    "SetUserBan",
    "SignUpCommandDTO",
    "SetUserBanCommandDTO",
    "UserResponseDTO",
]
