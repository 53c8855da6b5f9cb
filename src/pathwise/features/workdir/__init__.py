from .directory_stack import DirectoryStack, change_directory, working_directory

__all__ = ["DirectoryStack", "change_directory", "working_directory"]
