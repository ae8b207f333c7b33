from app.models.auth_session import AuthSession
from app.models.funcionario import Funcionario
from app.models.user import User

__all__ = [ "AuthSession", "Funcionario", "User" ]
