#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify MongoDB is reachable and indexes can be created.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from pymongo.errors import PyMongoError

from app.core.config import get_settings
from app.db.mongodb import get_mongo_db, init_mongo_indexes, test_mongo_connection, COLLECTIONS


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOBHUB API - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    Database: {settings.mongodb_db}")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        sys.exit(1)
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Creating indexes...")
    try:
        init_mongo_indexes()
    except PyMongoError as e:
        print(f"    ❌ Index creation failed: {e}")
        sys.exit(1)
    print("    ✅ Indexes ready")

    print("\n[3] Collection sizes...")
    db = get_mongo_db()
    for name in COLLECTIONS.values():
        print(f"    {name}: {db[name].estimated_document_count()}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
