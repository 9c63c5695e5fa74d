"""
Render the Bookstore App views against a running API

Usage:
    python -m bookstore.client --base-url http://localhost:8000 --pages 3
"""
import argparse
import asyncio
import logging

from dotenv import load_dotenv

from bookstore.client.api_client import BookstoreClient
from bookstore.client.app import BookstoreApp

load_dotenv()


async def run(base_url: str, pages: int) -> str:
    async with BookstoreClient(base_url) as client:
        app = BookstoreApp(client)
        await app.mount()

        # Each extra page is one scroll to the bottom of the document
        for _ in range(pages - 1):
            task = app.books.load_more()
            if task is None:
                break
            await task

        return app.render()


def main():
    parser = argparse.ArgumentParser(description='Render the Bookstore App list views')
    parser.add_argument('--base-url', default=None, help='API base URL (defaults to BOOKSTORE_API_URL)')
    parser.add_argument('--pages', type=int, default=1, help='Number of book pages to load')
    parser.add_argument('--verbose', action='store_true', help='Log requests and view state changes')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    print(asyncio.run(run(args.base_url, max(args.pages, 1))))


if __name__ == '__main__':
    main()
