"""MongoDB connection management for the accounts service.

One client per application context is kept on `flask.g` and closed on
teardown. Helpers expose the configured database, a health check and
index creation for the accounts collection.
"""

from __future__ import annotations

import logging
from typing import Optional
from pymongo import ASCENDING, MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError
from flask import current_app, g

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when a MongoDB connection cannot be established."""
    pass


def get_mongo_client() -> MongoClient:
    """Get or create the MongoDB client for the current app context.

    Returns:
        MongoClient: Configured MongoDB client instance

    Raises:
        DatabaseError: If connection cannot be established
    """
    if 'mongo_client' not in g:
        try:
            mongo_uri = current_app.config['MONGO_URI']
            g.mongo_client = MongoClient(
                mongo_uri,
                serverSelectionTimeoutMS=5000,  # 5 second timeout
                connectTimeoutMS=10000,
                socketTimeoutMS=20000,
                maxPoolSize=50,
                retryWrites=True
            )

            g.mongo_client.admin.command('ping')
            logger.info("MongoDB connection established successfully")

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseError(f"Database connection failed: {e}") from e

    return g.mongo_client


def get_db():
    """Return the configured database for the current application."""
    client = get_mongo_client()
    return client[current_app.config['MONGO_DB']]


def close_db(error: Optional[BaseException] = None) -> None:
    """Close the context's client, if one was opened.

    Args:
        error: Optional exception that caused the close (for logging)
    """
    mongo_client = g.pop('mongo_client', None)

    if mongo_client is not None:
        mongo_client.close()
        if error:
            logger.warning(f"Database connection closed due to error: {error}")
        else:
            logger.debug("Database connection closed successfully")


def init_app(app) -> None:
    """Register teardown and check connectivity once at startup.

    A database that is unreachable at startup is logged but does not
    prevent the app from starting.
    """
    app.teardown_appcontext(close_db)

    with app.app_context():
        try:
            database = get_db()
            collections = database.list_collection_names()
            logger.info(f"Database initialization successful. Found {len(collections)} collections.")
        except (DatabaseError, PyMongoError) as e:
            logger.error(f"Database initialization failed: {e}")


def health_check() -> dict:
    """Perform database health check.

    Returns:
        dict: Health check results with status and details
    """
    try:
        client = get_mongo_client()
        client.admin.command('ping')
        server_info = client.server_info()

        return {
            'status': 'healthy',
            'database': current_app.config['MONGO_DB'],
            'server_version': server_info.get('version', 'unknown'),
            'message': 'Database connection is operational'
        }

    except (DatabaseError, PyMongoError) as e:
        return {
            'status': 'unhealthy',
            'error': str(e),
            'message': 'Database connection failed'
        }


def ensure_indexes() -> bool:
    """Create the unique email index on the accounts collection.

    Returns:
        bool: True if the index was created or already existed
    """
    try:
        database = get_db()
        accounts = database[current_app.config['ACCOUNTS_COLLECTION']]
        accounts.create_index([('email', ASCENDING)], unique=True)
        logger.info("Database indexes ensured")
        return True
    except (DatabaseError, PyMongoError) as e:
        logger.error(f"Error ensuring indexes: {e}")
        return False
