from .file_loader import FileLoader, format_file_size, get_file_type
from .profiling_service import ProfilingService
from .recommendations import generate_recommendations
from .statistics import calculate_statistics
from .type_inference import detect_data_type

__all__ = [
    "FileLoader",
    "ProfilingService",
    "calculate_statistics",
    "detect_data_type",
    "format_file_size",
    "generate_recommendations",
    "get_file_type",
]
