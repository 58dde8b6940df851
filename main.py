#!/usr/bin/env python3
"""Entry point for BucketList."""

from bucketlist.main import main
import asyncio

if __name__ == "__main__":
    asyncio.run(main())
