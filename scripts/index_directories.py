import asyncio
import logging
import os
import sys

# Ensure src is in pythonpath
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv
load_dotenv()

from directory_search.db import AsyncSessionLocal
from directory_search.indexer import DirectoryIndexer
from directory_search.search.sink import SolrSink


async def main(record_ids):
    async with AsyncSessionLocal() as session, SolrSink() as sink:
        indexer = DirectoryIndexer.from_session(session, sink)

        if not indexer.is_enabled:
            print(f"{indexer.name} is disabled, nothing to do.")
            return 0

        print(f"{indexer.name} {indexer.version}: {indexer.description}")

        # Re-index only the given records
        if record_ids:
            for record_id in record_ids:
                count = await indexer.index_record(record_id)
                print(f"Record {record_id}: {count} document(s) sent.")
            await sink.commit()
            return 0

        print("Indexing all directories...")
        errors = await indexer.index_all()
        await sink.commit()

        if errors:
            print(f"Finished with {len(errors)} error(s):")
            for message in errors:
                print(f"  {message}")
            return 1

        print("Done! Index updated.")
        return 0

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(asyncio.run(main(sys.argv[1:])))
