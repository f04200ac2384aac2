#!/usr/bin/env python3
"""
KuCoin 계정 점검 스크립트

흐름:
1. secrets.yaml 로드
2. 서버 시간 동기화
3. 입금 내역 조회 (또는 트랜잭션 해시 검색)
4. Sub-account 목록 조회 (--sub-accounts)

사용 예:
    python scripts/check_account.py --currency USDT --status SUCCESS
    python scripts/check_account.py --tx-hash 2C24A6D5...
    python scripts/check_account.py --sub-accounts
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.kucoin.rate_limiter import KucoinApiError, RateLimitError
from adapters.kucoin.rest_client import KucoinRestClient
from adapters.models import DepositHistoryRequest
from core.config.loader import SecretsLoadError, get_exchange_config, load_secrets
from core.logging import setup_logging
from core.types import DepositStatus

logger = logging.getLogger("check_account")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="KuCoin 계정 점검")
    parser.add_argument(
        "--secrets",
        type=Path,
        default=None,
        help="secrets.yaml 경로 (기본: config/secrets.yaml)",
    )
    parser.add_argument("--currency", type=str, default=None, help="입금 자산 (예: USDT)")
    parser.add_argument(
        "--status",
        type=str,
        choices=[s.value for s in DepositStatus],
        default=None,
        help="입금 상태",
    )
    parser.add_argument("--page-size", type=int, default=None, help="페이지 크기 (10~500)")
    parser.add_argument("--tx-hash", type=str, default=None, help="검색할 트랜잭션 해시")
    parser.add_argument(
        "--sub-accounts",
        action="store_true",
        help="Sub-account 목록 조회",
    )
    return parser


async def run(args: argparse.Namespace) -> int:
    """점검 실행

    Returns:
        종료 코드 (0: 성공, 1: 실패)
    """
    try:
        secrets = load_secrets(args.secrets)
    except SecretsLoadError as e:
        logger.error(f"설정 로드 실패: {e}")
        return 1

    exchange_config = get_exchange_config(secrets)
    logger.info(f"REST URL: {exchange_config.rest_url}")

    async with KucoinRestClient.from_config(exchange_config) as client:
        try:
            offset = await client.sync_time()
            logger.info(f"서버 시간 동기화 완료 (offset: {offset}ms)")

            if args.tx_hash:
                deposit = await client.deposit.find_deposit_by_tx_hash(
                    args.tx_hash,
                    currency=args.currency,
                )
                if deposit is None:
                    logger.warning(f"입금 내역 없음: {args.tx_hash}")
                else:
                    logger.info(
                        f"  - {deposit.currency} {deposit.amount} "
                        f"[{deposit.status}] {deposit.created_at}"
                    )
            else:
                request = DepositHistoryRequest(
                    currency=args.currency,
                    status=args.status,
                    page_size=args.page_size,
                )
                page = await client.deposit.get_deposit_history(request)
                logger.info(
                    f"입금 내역: {len(page.items)}건 "
                    f"(page {page.current_page}/{page.total_page}, total {page.total_num})"
                )
                for item in page.items:
                    logger.info(
                        f"  - {item.currency} {item.amount} [{item.status}] "
                        f"tx={item.wallet_tx_id}"
                    )

            if args.sub_accounts:
                subs = await client.sub_account.fetch_all()
                logger.info(f"Sub-account: {subs.total_num}개")
                for sub in subs.items:
                    logger.info(f"  - {sub.sub_name} (user_id: {sub.user_id})")

        except ValueError as e:
            logger.error(f"잘못된 조회 조건: {e}")
            return 1
        except RateLimitError as e:
            logger.error(f"Rate Limit: {e}")
            return 1
        except KucoinApiError as e:
            logger.error(f"API 오류: {e}")
            return 1
        except httpx.RequestError as e:
            logger.error(f"네트워크 오류: {e}")
            return 1

    return 0


def main() -> int:
    args = build_parser().parse_args()
    setup_logging("check_account")
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
