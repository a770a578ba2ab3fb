from .path import default_cache_path, program_name, to_abs_path

__all__ = ["default_cache_path", "program_name", "to_abs_path"]
