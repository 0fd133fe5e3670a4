"""
Startup file loader for dualtodo.

Lists what is in the data directory and reads one todo file from it, logging
what it finds. Nothing here touches the todo lists yet: a caller that wants the
contents in the editor passes them to TodoCollection.bulk_load() before the
event loop starts, or to EditorState.load() once the editor exists.
"""
import os
from typing import List, Optional

from dualtodo import logger

def list_data_dir(data_dir: str) -> List[str]:
    """
    Return the sorted paths of the entries in `data_dir`, logging each one.
    An unreadable or missing directory is logged and yields an empty list.
    """
    try:
        entries_iter = os.scandir(data_dir)
    except OSError as e:
        logger.log(f"Error listing directory {data_dir}: {e}")
        return []
    with entries_iter:
        names = sorted(entry.name for entry in entries_iter)
    paths = [os.path.join(data_dir, name) for name in names]
    for path in paths:
        logger.log(f"Name: {path}")
    return paths

def read_todo_file(path: str) -> Optional[str]:
    """Read the whole file at `path`; on failure log the error and return None."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.log(f"Failed to load file {path}: {e}")
        return None
    logger.log(f"Successfully loaded file {path}")
    logger.log(f"Contents from file:\n{contents}")
    return contents

def initialize(data_dir: str, data_file: str) -> Optional[str]:
    """Run the startup load: list `data_dir`, then read `data_file` inside it."""
    list_data_dir(data_dir)
    return read_todo_file(os.path.join(data_dir, data_file))
