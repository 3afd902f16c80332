from .analysis import UserAnalysis, MAX_USER_ID_LENGTH, MAX_FILE_PATH_LENGTH

__all__ = ["UserAnalysis", "MAX_USER_ID_LENGTH", "MAX_FILE_PATH_LENGTH"]
