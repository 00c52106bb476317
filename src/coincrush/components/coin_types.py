from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

@dataclass(frozen=True, slots=True)
class CoinType:
    slug: str
    name: str
    image: str


DEFAULT_COINS: Tuple[CoinType, ...] = (
    CoinType('btc', 'Bitcoin', 'https://assets.coingecko.com/coins/images/1/large/bitcoin.png'),
    CoinType('eth', 'Ethereum', 'https://assets.coingecko.com/coins/images/279/large/ethereum.png'),
    CoinType('sol', 'Solana', 'https://assets.coingecko.com/coins/images/4128/large/solana.png'),
    CoinType('ada', 'Cardano', 'https://assets.coingecko.com/coins/images/975/large/cardano.png'),
    CoinType('xrp', 'XRP', 'https://assets.coingecko.com/coins/images/44/large/xrp-symbol-white-128.png'),
    CoinType('dot', 'Polkadot', 'https://assets.coingecko.com/coins/images/12171/large/polkadot.png'),
    CoinType('matic', 'Polygon', 'https://assets.coingecko.com/coins/images/4713/large/polygon.png'),
)


@dataclass(slots=True)
class CoinCatalog:
    """Ordered coin definitions stored on a single entity.

    A cell value is an index into ``coins``. The board engine only ever needs
    the count; names and images are for whoever draws the board.
    """
    coins: List[CoinType] = field(default_factory=lambda: list(DEFAULT_COINS))

    def __post_init__(self) -> None:
        # Preserve order while dropping repeated slugs.
        seen: set[str] = set()
        filtered: List[CoinType] = []
        for coin in self.coins:
            if coin.slug not in seen:
                filtered.append(coin)
                seen.add(coin.slug)
        if not filtered:
            raise ValueError("CoinCatalog needs at least one coin type")
        self.coins = filtered

    def kind_count(self) -> int:
        return len(self.coins)

    def coin_for(self, kind: int) -> CoinType:
        return self.coins[kind]

    def kind_of(self, slug: str) -> Optional[int]:
        for kind, coin in enumerate(self.coins):
            if coin.slug == slug:
                return kind
        return None

    def slugs(self) -> List[str]:
        return [coin.slug for coin in self.coins]

    @classmethod
    def from_coins(cls, coins: Sequence[CoinType]) -> "CoinCatalog":
        return cls(coins=list(coins))
