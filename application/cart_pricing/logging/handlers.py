"""
Logging handlers for the cart pricing engine.

With Firehose enabled, the records of one cart evaluation are held in memory
and shipped as a single batch when the evaluation finishes, when an error is
logged, or when the buffer fills up. Without Firehose each module writes JSON
lines to its own file under LOG_DIR.
"""
import logging
import os
import time
from logging.handlers import MemoryHandler
from typing import List

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from cart_pricing.core.constants import EVALUATION_END_FLAG
from cart_pricing.logging.config import LoggingConfig
from cart_pricing.logging.formatters import AppLogsJSONFormatter

# Settings
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()

LOG_DEBUG_PRINTS = configs.LOG_DEBUG_PRINTS

def dbg(msg: str) -> None:
    """Lightweight debug print; enabled when LOG_DEBUG_PRINTS=true"""
    if LOG_DEBUG_PRINTS:
        print(msg)


class FirehoseBatchWriter:
    """Puts batches of formatted records on one delivery stream, resending only the records that failed"""

    def __init__(self, stream_name: str, client=None):
        self.stream_name = stream_name
        self.client = client or boto3.client(
            "firehose",
            region_name=LoggingConfig.FIREHOSE_REGION_NAME,
            aws_access_key_id=LoggingConfig.FIREHOSE_ACCESS_KEY_ID,
            aws_secret_access_key=LoggingConfig.FIREHOSE_SECRET_ACCESS_KEY,
            config=Config(connect_timeout=10, read_timeout=30, retries={"max_attempts": 2}),
        )
        self.retry_count = LoggingConfig.FIREHOSE_RETRY_COUNT
        self.retry_delay = LoggingConfig.FIREHOSE_RETRY_DELAY

    def put_batch(self, records: List[str]) -> bool:
        # newline-delimited so the delivered objects stay one JSON document per line
        pending = [{"Data": f"{record}\n"} for record in records]

        for attempt in range(self.retry_count):
            if not pending:
                return True
            try:
                response = self.client.put_record_batch(DeliveryStreamName=self.stream_name, Records=pending)
            except (BotoCoreError, ClientError) as e:
                dbg(f"[Firehose:{self.stream_name}] attempt={attempt + 1} error={e}")
            else:
                failed_count = response.get("FailedPutCount", 0)
                dbg(f"[Firehose:{self.stream_name}] attempt={attempt + 1} sent={len(pending)} failed={failed_count}")
                if failed_count == 0:
                    return True
                failed = [
                    entry for entry, result in zip(pending, response.get("RequestResponses", []))
                    if result.get("ErrorCode")
                ]
                pending = failed or pending

            if attempt < self.retry_count - 1:
                time.sleep(self.retry_delay * (2 ** attempt))

        return False


class EvaluationBufferedHandler(MemoryHandler):
    """Buffers records until the evaluation ends, an ERROR arrives or capacity is reached"""

    def __init__(self, writer: FirehoseBatchWriter, capacity: int):
        super().__init__(capacity=capacity, flushLevel=logging.ERROR)
        self.writer = writer
        self.setFormatter(AppLogsJSONFormatter())

    def shouldFlush(self, record):
        return super().shouldFlush(record) or getattr(record, EVALUATION_END_FLAG, False)

    def flush(self):
        self.acquire()
        try:
            records = [self.format(record) for record in self.buffer]
            self.buffer.clear()
        finally:
            self.release()

        if records:
            ok = self.writer.put_batch(records)
            dbg(f"[Buffer:{self.writer.stream_name}] flushed={len(records)} ok={ok}")


_handlers = {}

def get_local_file_handler(name: str = 'app'):
    os.makedirs(LoggingConfig.LOG_DIR, exist_ok=True)
    handler = logging.FileHandler(os.path.join(LoggingConfig.LOG_DIR, f'{name}.log'))
    handler.setFormatter(AppLogsJSONFormatter())
    return handler


def get_app_handler():
    if LoggingConfig.FIREHOSE_ENABLED:
        if 'app' not in _handlers:
            stream = LoggingConfig.APP_LOGS_STREAM_NAME or 'cart-pricing-app-logs'
            _handlers['app'] = EvaluationBufferedHandler(FirehoseBatchWriter(stream), LoggingConfig.APP_LOGS_CAPACITY)
        return _handlers['app']
    else:
        return get_local_file_handler('app')
