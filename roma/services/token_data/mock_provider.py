"""
Mock token data provider for development.

Generates realistic-looking memecoin market data without making API calls.
Uses deterministic random generation based on address for consistent results.
"""

from datetime import datetime, timedelta, timezone

from roma.core.models import Chain, ProvenanceTag, TokenRecord
from roma.services.simulation import seeded_rng


class MockTokenDataProvider:
    """
    Mock implementation of TokenDataProvider protocol.

    The same (address, chain) always returns the same data. Records are
    tagged as coming from DexScreener, the provider they stand in for.

    Usage:
        provider = MockTokenDataProvider()
        data = await provider.get_token_data("So111...", Chain.SOLANA)
    """

    name = ProvenanceTag.DEXSCREENER

    # Realistic memecoin name/symbol pairs for mocking
    MOCK_TOKENS = [
        ("Bonk", "BONK"),
        ("Dogwifhat", "WIF"),
        ("Popcat", "POPCAT"),
        ("Pepe", "PEPE"),
        ("Book of Meme", "BOME"),
        ("Brett", "BRETT"),
        ("Floki", "FLOKI"),
        ("Mog Coin", "MOG"),
        ("Cat in a dogs world", "MEW"),
        ("Myro", "MYRO"),
    ]

    # Fixed reference point so created_at is reproducible
    EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def get_token_data(self, address: str, chain: Chain) -> TokenRecord:
        """
        Generate mock token data for the given address.

        Args:
            address: Token address
            chain: Blockchain

        Returns:
            TokenRecord with mock values
        """
        rng = seeded_rng(address, chain.value)

        name, symbol = rng.choice(self.MOCK_TOKENS)

        market_cap = rng.uniform(20_000, 50_000_000)
        liquidity = market_cap * rng.uniform(0.02, 0.3)
        volume = market_cap * rng.uniform(0.001, 0.5)
        supply = 10 ** rng.randint(8, 12)

        return TokenRecord(
            address=address,
            chain=chain,
            name=name,
            symbol=symbol,
            price=round(market_cap / supply, 12),
            price_change_24h=round(rng.uniform(-60, 120), 2),
            volume_24h=round(volume, 2),
            market_cap=round(market_cap, 2),
            liquidity=round(liquidity, 2),
            holders=rng.randint(50, 80_000),
            created_at=(self.EPOCH + timedelta(days=rng.randint(0, 365))).isoformat(),
            source=self.name,
        )
