#!/usr/bin/env python3
"""
Example usage of the GIS location query helpers.

Connects to the MongoDB deployment named in config/environment_config.json
and runs a few spatial queries against the location collection.
"""

import sys

from pymongo.errors import PyMongoError

from gis_core.config import ConfigLoader
from gis_core.connection import MongoConnector
from gis_core.exceptions import GISBaseException
from gis_core.utils import setup_logging, get_logger
from modules.location_query import GeoQueryExecutor

# Roughly Chiang Mai old city
OLD_CITY = [[98.98, 18.78], [98.98, 18.80], [99.00, 18.80], [99.00, 18.78], [98.98, 18.78]]


def main(environment: str = "development") -> int:
    config_loader = ConfigLoader()
    try:
        env_config = config_loader.load_environment_config(environment)
    except GISBaseException as e:
        print(f"Configuration error: {e}")
        return 1
    
    setup_logging(environment=environment, log_level=env_config["logging"].get("level", "INFO"))
    logger = get_logger(__name__)
    
    connector = MongoConnector(config_loader, environment)
    try:
        client = connector.connect()
        executor = GeoQueryExecutor.from_config_loader(client, config_loader, environment)
        
        for record in executor.intersects(OLD_CITY):
            logger.info(f"Intersects: {record.village}, {record.sub_district}, {record.district}")
        
        within_box = executor.box([98.9, 18.7], [99.1, 18.9])
        logger.info(f"{len(within_box)} areas lie inside the bounding box")
        
        nearby = executor.center([98.99, 18.79], 5000)
        logger.info(f"{len(nearby)} areas lie within 5 km of the old city centre")
    except GISBaseException as e:
        logger.error(f"Connection error: {e}")
        return 1
    except PyMongoError as e:
        logger.error(f"Query failed: {e}")
        return 1
    finally:
        connector.disconnect()
    
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
