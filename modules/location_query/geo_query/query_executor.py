"""Spatial Query Execution

The single routine every spatial query goes through: resolve the location
collection, run ``find`` under a bounded-duration scope, drain the cursor and
decode each document.
"""

from typing import Any, Dict, List, Optional

import pymongo
from pymongo import MongoClient

from gis_core.config import QueryConfig
from gis_core.utils import get_logger, log_performance
from ..models import LocationRecord

logger = get_logger(__name__)


def _predicate_name(query_filter: Dict[str, Any]) -> str:
    """Operator keys of the filter, for log lines only."""
    names = []
    for expression in query_filter.values():
        if isinstance(expression, dict):
            names.extend(expression.keys())
    return ",".join(names) or "<none>"


@log_performance
def execute_spatial_query(client: MongoClient,
                          query_filter: Dict[str, Any],
                          config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Run one find against the location collection and return every match.
    
    The whole round trip, including draining the cursor, runs inside
    ``pymongo.timeout``; the cursor is closed on every exit path. Driver
    errors (including timeouts) and decode errors propagate unchanged, and
    no partial result is ever returned.
    
    Args:
        client: Connected MongoClient, owned by the caller
        query_filter: Filter document, usually from ``query_filters``
        config: Database, collection and timeout settings (defaults apply when None)
        
    Returns:
        Matching records in the order the server produced them
        
    Raises:
        pymongo.errors.PyMongoError: Query failed, was rejected, or timed out
        pydantic.ValidationError: A result document does not match LocationRecord
    """
    config = config or QueryConfig()
    collection = client[config.database][config.collection]
    
    logger.debug(
        f"Querying {config.database}.{config.collection} with {_predicate_name(query_filter)} "
        f"(timeout {config.timeout_seconds}s)"
    )
    
    with pymongo.timeout(config.timeout_seconds):
        with collection.find(query_filter) as cursor:
            records = [LocationRecord.from_document(document) for document in cursor]
    
    logger.debug(f"Query returned {len(records)} location records")
    return records
