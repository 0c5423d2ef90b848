"""Reference catalog of retail treasury bond series (offer as of October 2025)."""

from __future__ import annotations

from src.models.bond import BondModel, FixedRate, InflationLinked, ReferenceRateLinked

_OFFER_URL = 'https://www.obligacjeskarbowe.pl/oferta-obligacji'


def _links(slug: str, page: str) -> dict[str, str]:
    url = f'{_OFFER_URL}/{slug}/{page}/'
    return {'details_url': url, 'buy_url': url}


REFERENCE_CATALOG: tuple[BondModel, ...] = (
    BondModel(
        name='OTS',
        series='OTS0126',
        display_name='Obligacje 3-miesięczne OTS',
        maturity_months=3,
        rate=FixedRate(interest_rate=2.75, compound=False),
        penalty=0.0,
        lose_interest_on_early_withdrawal=True,
        early_withdrawal_possible=False,
        interest_payment='at_end',
        purchase_price=100.0,
        exchange_price=100.0,
        display={
            'type': '3-miesięczne',
            'type_label': 'STAŁOPROCENTOWE',
            'advantages': 'Zysk określony z góry, nabywca zna wysokość odsetek w dniu zakupu',
            'interest_details': '0,69 zł',
            'interest_period': '01.09.2025-01.12.2025',
            'withdrawal_fee': 'brak',
            'withdrawal_conditions': '3 miesiące od dnia zakupu',
            **_links('obligacje-3-miesieczne-ots', 'ots0126'),
        },
    ),
    BondModel(
        name='ROR',
        series='ROR1026',
        display_name='Obligacje roczne ROR',
        maturity_months=12,
        rate=ReferenceRateLinked(interest_rate=4.75, margin=0.0),
        penalty=0.5,
        early_withdrawal_possible=True,
        interest_payment='monthly',
        purchase_price=100.0,
        exchange_price=99.9,
        display={
            'type': 'roczne',
            'type_label': 'ZMIENNOPROCENTOWE',
            'advantages': 'Regularny (co miesiąc) dopływ gotówki z wypłat odsetek',
            'interest_details': 'Naliczane od wartości nominalnej, wypłacane miesięcznie',
            'interest_period': '01.10.2025 - 30.11.2025',
            'withdrawal_fee': '50 gr',
            'withdrawal_conditions': 'Rok od dnia zakupu',
            **_links('obligacje-roczne-ror', 'ror102'),
        },
    ),
    BondModel(
        name='DOR',
        series='DOR1027',
        display_name='Obligacje 2-letnie DOR',
        maturity_months=24,
        rate=ReferenceRateLinked(interest_rate=4.9, margin=0.15),
        penalty=0.7,
        early_withdrawal_possible=True,
        interest_payment='monthly',
        purchase_price=100.0,
        exchange_price=99.9,
        display={
            'type': '2-letnie',
            'type_label': 'ZMIENNOPROCENTOWE',
            'advantages': 'Regularny (co miesiąc) dopływ gotówki z wypłat odsetek',
            'interest_details': 'Naliczane od wartości nominalnej, wypłacane miesięcznie',
            'interest_period': '01.10.2025 - 30.11.2025',
            'withdrawal_fee': '70 gr',
            'withdrawal_conditions': 'Dwa lata od dnia zakupu',
            **_links('obligacje-2-letnie-dor', 'dor1027'),
        },
    ),
    BondModel(
        name='TOS',
        series='TOS1028',
        display_name='Obligacje 3-letnie TOS',
        maturity_months=36,
        rate=FixedRate(interest_rate=5.15, compound=True),
        penalty=1.0,
        early_withdrawal_possible=False,
        interest_payment='at_end',
        purchase_price=100.0,
        exchange_price=99.9,
        display={
            'type': '3-letnie',
            'type_label': 'STAŁOPROCENTOWE',
            'advantages': 'Klient wie, jakie odsetki otrzyma po trzech latach',
            'interest_details': 'Naliczane od wartości nominalnej, kapitalizowane rocznie, wypłacane w dniu wykupu',
            'interest_period': '01.10.2025 - 01.10.2028',
            'withdrawal_fee': '1 zł',
            'withdrawal_conditions': 'Trzy lata od dnia zakupu',
            **_links('obligacje-3-letnie-tos', 'tos1028'),
        },
    ),
    BondModel(
        name='COI',
        series='COI1029',
        display_name='Obligacje 4-letnie COI',
        maturity_months=48,
        rate=InflationLinked(interest_rate=5.5, margin=1.5, compound=False),
        penalty=2.0,
        early_withdrawal_possible=True,
        interest_payment='yearly',
        purchase_price=100.0,
        exchange_price=None,
        display={
            'type': '4-letnie',
            'type_label': 'INDEKSOWANE INFLACJĄ',
            'advantages': 'Stała marża – od drugiego okresu indeksowane inflacją',
            'interest_details': 'Naliczane od wartości nominalnej, wypłacane rocznie',
            'interest_period': '01.10.2025 - 01.10.2026',
            'withdrawal_fee': '2 zł',
            'withdrawal_conditions': 'Cztery lata od dnia zakupu',
            **_links('obligacje-4-letnie-coi', 'coi1029'),
        },
    ),
    BondModel(
        name='ROS',
        series='ROS1031',
        display_name='Obligacje 6-letnie ROS',
        maturity_months=72,
        rate=InflationLinked(interest_rate=5.7, margin=1.75, compound=True),
        penalty=2.0,
        early_withdrawal_possible=True,
        interest_payment='at_end',
        purchase_price=100.0,
        exchange_price=None,
        display={
            'type': '6-letnie',
            'type_label': 'INDEKSOWANE INFLACJĄ',
            'advantages': (
                'Preferencyjne oprocentowanie, stała marża, od drugiego okresu indeksowane inflacją, '
                'coroczna kapitalizacja'
            ),
            'interest_details': 'Naliczane od wartości nominalnej, kapitalizowane rocznie',
            'interest_period': '01.10.2025 - 01.10.2026',
            'withdrawal_fee': '2 zł',
            'withdrawal_conditions': 'Sześć lat od dnia zakupu',
            **_links('obligacje-6-letnie-ros', 'ros1031'),
        },
    ),
    BondModel(
        name='EDO',
        series='EDO1035',
        display_name='Obligacje 10-letnie EDO',
        maturity_months=120,
        rate=InflationLinked(interest_rate=6.0, margin=2.0, compound=True),
        penalty=3.0,
        early_withdrawal_possible=True,
        interest_payment='at_end',
        purchase_price=100.0,
        exchange_price=99.9,
        display={
            'type': '10-letnie',
            'type_label': 'INDEKSOWANE INFLACJĄ',
            'advantages': (
                'Stała marża – od drugiego okresu indeksowane inflacją, coroczna kapitalizacja '
                'znacznie zwiększa zyskowność'
            ),
            'interest_details': 'Naliczane od wartości nominalnej, kapitalizowane rocznie',
            'interest_period': '01.10.2025 - 01.10.2026',
            'withdrawal_fee': '3 zł',
            'withdrawal_conditions': 'Dziesięć lat od dnia zakupu',
            **_links('obligacje-10-letnie-edo', 'edo1035'),
        },
    ),
    BondModel(
        name='ROD',
        series='ROD1037',
        display_name='Obligacje 12-letnie ROD',
        maturity_months=144,
        rate=InflationLinked(interest_rate=6.25, margin=2.25, compound=True),
        penalty=3.0,
        early_withdrawal_possible=True,
        interest_payment='at_end',
        purchase_price=100.0,
        exchange_price=None,
        display={
            'type': '12-letnie',
            'type_label': 'INDEKSOWANE INFLACJĄ',
            'advantages': (
                'Preferencyjne oprocentowanie, stała marża, od drugiego okresu indeksowane inflacją, '
                'coroczna kapitalizacja znacznie zwiększa zyskowność'
            ),
            'interest_details': 'Naliczane od wartości nominalnej, kapitalizowane rocznie',
            'interest_period': '01.10.2025 - 01.10.2026',
            'withdrawal_fee': '3 zł',
            'withdrawal_conditions': 'Dwanaście lat od dnia zakupu',
            **_links('obligacje-12-letnie-rod', 'rod1037'),
        },
    ),
)
