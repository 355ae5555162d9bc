"""DynamoDB session store for Lambda deployments."""

from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager
from typing import Any

import aioboto3


class DynamoDBSessionBackend:
    """Sessions in a DynamoDB table.

    Table schema:
        Partition key: session_id (S)
        Attributes: data (S, JSON), created_at (N), ttl (N)

    Turn on DynamoDB TTL for the ``ttl`` attribute so stale rows get reaped.
    """

    def __init__(
        self,
        table_name: str = "draftgen_sessions",
        max_age: int = 7 * 24 * 3600,
        endpoint_url: str = "",
        region_name: str = "us-east-1",
    ) -> None:
        self._table_name = table_name
        self._max_age = max_age
        self._session = aioboto3.Session()
        self._endpoint_url = endpoint_url or None
        self._region_name = region_name

    @asynccontextmanager
    async def _table(self):
        async with self._session.resource(
            "dynamodb",
            endpoint_url=self._endpoint_url,
            region_name=self._region_name,
        ) as dynamodb:
            yield await dynamodb.Table(self._table_name)

    async def load(self, session_id: str) -> dict[str, Any] | None:
        async with self._table() as table:
            response = await table.get_item(Key={"session_id": session_id})

        item = response.get("Item")
        if item is None:
            return None

        if time.time() - float(item.get("created_at", 0)) > self._max_age:
            await self.delete(session_id)
            return None
        return json.loads(item["data"])

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        now = int(time.time())
        async with self._table() as table:
            await table.put_item(
                Item={
                    "session_id": session_id,
                    "data": json.dumps(data),
                    "created_at": now,
                    "ttl": now + self._max_age,
                }
            )

    async def delete(self, session_id: str) -> None:
        async with self._table() as table:
            await table.delete_item(Key={"session_id": session_id})
