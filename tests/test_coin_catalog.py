import pytest

from coincrush.components.coin_types import CoinCatalog, CoinType, DEFAULT_COINS
from coincrush.session import CoinCrushSession
from coincrush.systems.game_state_utils import get_catalog


def test_default_catalog_lookups():
    catalog = CoinCatalog()
    assert catalog.kind_count() == 7
    assert catalog.slugs() == ['btc', 'eth', 'sol', 'ada', 'xrp', 'dot', 'matic']
    assert catalog.coin_for(1).name == 'Ethereum'
    assert catalog.kind_of('matic') == 6
    assert catalog.kind_of('doge') is None


def test_repeated_slugs_dropped_in_order():
    catalog = CoinCatalog.from_coins([DEFAULT_COINS[2], DEFAULT_COINS[0], DEFAULT_COINS[2]])
    assert catalog.slugs() == ['sol', 'btc']


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        CoinCatalog(coins=[])


def test_session_draws_only_catalog_kinds():
    coins = [
        CoinType('red', 'Red', 'red.png'),
        CoinType('green', 'Green', 'green.png'),
        CoinType('blue', 'Blue', 'blue.png'),
        CoinType('gold', 'Gold', 'gold.png'),
    ]
    session = CoinCrushSession(size=6, catalog=coins, seed=8)
    catalog = get_catalog(session.world)
    assert catalog.kind_count() == 4
    assert {catalog.coin_for(kind).slug for kind in session.cells} <= set(catalog.slugs())
