from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Iterable, List

import pandas as pd
from tqdm import tqdm

from pillarcandy.riksdagen import get_client
from pillarcandy.riksdagen.client import RiksdagenClient
from pillarcandy.riksdagen.document import LAW_FIELDS
from pillarcandy.riksdagen.lookup import InvalidLaw, lookup_law

BATCH_COLUMNS = ["query", "law_id", "ok", "error", *LAW_FIELDS.keys()]


def lookup_batch(
    queries: Iterable[str],
    client: RiksdagenClient | None = None,
    progress: bool = True,
) -> pd.DataFrame:
    """
    Look up each identifier independently; one row per query, failures included.
    """
    client = client or get_client()
    queries = list(queries)

    log_rows: List[Dict[str, Any]] = []
    for q in tqdm(queries, total=len(queries), disable=not progress):
        result = lookup_law(q, client=client, mode="metadata")
        row: Dict[str, Any] = dict(
            query=q,
            law_id=str(result.law_id) if result.law_id is not None else None,
            ok=result.ok,
            error=result.error if isinstance(result, InvalidLaw) else None,
        )
        if isinstance(result, InvalidLaw):
            row.update({k: None for k in LAW_FIELDS})
        else:
            meta = asdict(result.document)
            row.update({k: meta[k] for k in LAW_FIELDS})
        log_rows.append(row)

    return pd.DataFrame(log_rows, columns=BATCH_COLUMNS)
