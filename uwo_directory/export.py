"""
Export directory records to pandas and CSV.
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable

import pandas as pd
from loguru import logger

from uwo_directory.settings import OUTPUT_DIR
from uwo_directory.models import DirectoryRecord

logger = logger.bind(module="export")

RECORD_COLUMNS = ['last_name', 'given_name', 'email', 'faculty']


def records_to_dataframe(records: Iterable[DirectoryRecord]) -> pd.DataFrame:
    """
    Convert directory records to a DataFrame.

    Args:
        records: Records as returned by a forward lookup

    Returns:
        DataFrame with one row per record, in input order
    """
    return pd.DataFrame([record.to_dict() for record in records], columns=RECORD_COLUMNS)


def save_records(
    records: Iterable[DirectoryRecord],
    filename: str,
    output_dir: Path = OUTPUT_DIR,
    add_timestamp: bool = True,
) -> Path:
    """
    Save directory records to CSV with optional timestamping.

    Args:
        records: Records to save
        filename: Base filename
        output_dir: Output directory
        add_timestamp: Whether to add timestamp to filename

    Returns:
        Path to saved file
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    if add_timestamp:
        base_name = Path(filename).stem
        extension = Path(filename).suffix or '.csv'
        filename = f"{base_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}{extension}"

    df = records_to_dataframe(records)
    file_path = output_dir / filename
    df.to_csv(file_path, index=False)

    logger.success(f"Saved {len(df)} records to {file_path}")
    return file_path
