from .config import DATASETS, DEFAULT_RAW_ROOT, DatasetConfig, DatasetId, get_dataset_config
from .document import Document
from .download import download_dataset
from .loader import load_documents, read_documents

__all__ = [
    "DATASETS",
    "DEFAULT_RAW_ROOT",
    "DatasetConfig",
    "DatasetId",
    "Document",
    "download_dataset",
    "get_dataset_config",
    "load_documents",
    "read_documents",
]
