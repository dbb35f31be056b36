from .convert import handle_convert

__all__ = ["handle_convert"]
