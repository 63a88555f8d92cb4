from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Dict, List, Union

import numpy as np
import pandas as pd


JSONScalar = Union[str, int, float, bool, None]
JSONType = Union[JSONScalar, List["JSONType"], Dict[str, "JSONType"]]


def to_jsonable(obj: Any) -> JSONType:
    """
    Convert job results into JSON-serializable structures for rq and Supabase.
    - NaN/inf -> None
    - numpy scalars and arrays -> python values / lists
    - DataFrames -> list of records
    - datetime/date -> isoformat
    - Anything else -> str(obj)
    """
    if obj is None:
        return None

    if isinstance(obj, (str, bool, int)):
        return obj

    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None

    if isinstance(obj, np.generic):
        return to_jsonable(obj.item())

    if isinstance(obj, np.ndarray):
        return [to_jsonable(v) for v in obj.tolist()]

    if isinstance(obj, pd.DataFrame):
        return [to_jsonable(row) for row in obj.to_dict(orient="records")]

    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(v) for v in obj]

    return str(obj)
