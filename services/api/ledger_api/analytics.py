"""Session analytics.

Pure aggregation over `Session` records. Nothing here touches the database, so
the same functions serve the per-player and overall analytics endpoints and
can be tested with plain lists.

Definitions:
- profit = cash_out - buy_in (may be negative)
- a session is a win when its profit is strictly positive
- win rate = wins / sessions * 100, or 0 when there are no sessions
- cumulative profit runs over sessions sorted by date (ties by id)
"""

from datetime import date
from typing import Iterable, Sequence

import pandas as pd

from .schemas import Player, Session

_FRAME_COLUMNS = ["id", "player_id", "buy_in", "cash_out", "session_date"]


def _money(value) -> float:
    return round(float(value), 2)


def _win_rate(wins: int, count: int) -> float:
    return round(wins / count * 100, 2) if count else 0.0


def sessions_frame(sessions: Iterable[Session]) -> pd.DataFrame:
    """Build a date-ordered DataFrame with a `profit` column."""
    frame = pd.DataFrame(
        [
            {
                "id": s.id,
                "player_id": s.player_id,
                "buy_in": s.buy_in,
                "cash_out": s.cash_out,
                "session_date": s.session_date,
            }
            for s in sessions
        ],
        columns=_FRAME_COLUMNS,
    ).astype({"buy_in": float, "cash_out": float})
    frame["profit"] = frame["cash_out"] - frame["buy_in"]
    return frame.sort_values(["session_date", "id"], kind="stable").reset_index(drop=True)


def filter_by_date(sessions: Iterable[Session], day: date) -> list[Session]:
    """Keep only the sessions played on `day`."""
    return [s for s in sessions if s.session_date == day]


def summarize_sessions(sessions: Iterable[Session]) -> dict:
    """Aggregate a set of sessions.

    Returns:
        dict: camelCase keys, ready to serialize:
            totalBuyIn, totalCashOut, netProfit, sessionCount, winCount,
            winRate (percent), sessionProfits and cumulativeProfit (lists in
            date order), dailyProfit (`YYYY-MM-DD` -> profit, ascending), and
            buyInDistribution (buy-in rounded to whole units -> session count,
            ascending by amount).
    """
    frame = sessions_frame(sessions)
    count = len(frame)
    wins = int((frame["profit"] > 0).sum())

    daily = frame.groupby("session_date", sort=True)["profit"].sum()
    # halves round up (2.5 -> 3); amounts are non-negative
    buckets = ((frame["buy_in"] + 0.5) // 1).astype(int)
    distribution = buckets.groupby(buckets, sort=True).size()

    total_buy_in = _money(frame["buy_in"].sum())
    total_cash_out = _money(frame["cash_out"].sum())

    return {
        "totalBuyIn": total_buy_in,
        "totalCashOut": total_cash_out,
        "netProfit": _money(total_cash_out - total_buy_in),
        "sessionCount": count,
        "winCount": wins,
        "winRate": _win_rate(wins, count),
        "sessionProfits": [_money(p) for p in frame["profit"]],
        "cumulativeProfit": [_money(p) for p in frame["profit"].cumsum()],
        "dailyProfit": {d.isoformat(): _money(p) for d, p in daily.items()},
        "buyInDistribution": {str(amount): int(n) for amount, n in distribution.items()},
    }


def player_breakdown(players: Sequence[Player], sessions: Iterable[Session]) -> list[dict]:
    """Per-player net profit, session count and win rate.

    Only players with at least one session in `sessions` are included, in the
    order they appear in `players`. Sessions of players missing from
    `players` are ignored.
    """
    frame = sessions_frame(sessions)
    if frame.empty:
        return []
    frame["win"] = frame["profit"] > 0
    grouped = frame.groupby("player_id").agg(
        net_profit=("profit", "sum"),
        session_count=("id", "count"),
        win_count=("win", "sum"),
    )

    breakdown = []
    for player in players:
        if player.id not in grouped.index:
            continue
        row = grouped.loc[player.id]
        count = int(row["session_count"])
        breakdown.append({
            "playerId": player.id,
            "name": player.name,
            "netProfit": _money(row["net_profit"]),
            "sessionCount": count,
            "winRate": _win_rate(int(row["win_count"]), count),
        })
    return breakdown
