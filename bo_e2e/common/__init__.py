from .login_bo import login_bo

__all__ = ["login_bo"]
