from typing import Dict, NamedTuple, Tuple


class City(NamedTuple):
    slug: str
    name: str
    search_terms: Tuple[str, ...]


CITIES: Dict[str, Tuple[City, ...]] = {
    'west': (
        City('seattle', 'Seattle', (
            'seattle downtown skyline',
            'seattle cityscape buildings',
            'seattle financial district',
            'seattle urban architecture',
            'seattle city aerial',
        )),
        City('portland', 'Portland', (
            'portland oregon downtown skyline',
            'portland cityscape',
            'portland urban buildings',
            'portland city aerial',
        )),
        City('san-francisco', 'San Francisco', (
            'san francisco downtown skyline',
            'san francisco financial district',
            'san francisco cityscape',
            'san francisco urban buildings',
            'san francisco embarcadero',
        )),
        City('los-angeles', 'Los Angeles', (
            'los angeles downtown skyline',
            'la cityscape buildings',
            'los angeles financial district',
            'dtla urban architecture',
            'los angeles city aerial',
        )),
        City('san-diego', 'San Diego', (
            'san diego downtown skyline',
            'san diego cityscape',
            'san diego gaslamp district',
            'san diego urban buildings',
        )),
        City('sacramento', 'Sacramento', (
            'sacramento california downtown',
            'sacramento skyline',
            'sacramento cityscape',
        )),
        City('oakland', 'Oakland', (
            'oakland california downtown',
            'oakland skyline',
            'oakland cityscape buildings',
        )),
        City('phoenix', 'Phoenix', (
            'phoenix arizona downtown skyline',
            'phoenix cityscape',
            'phoenix urban buildings',
            'phoenix financial district',
        )),
        City('denver', 'Denver', (
            'denver colorado downtown skyline',
            'denver cityscape',
            'denver urban buildings',
            'denver financial district',
        )),
        City('las-vegas', 'Las Vegas', (
            'las vegas strip skyline',
            'las vegas downtown cityscape',
            'las vegas urban buildings',
        )),
    ),
    'east': (
        City('new-york', 'New York', (
            'new york city manhattan skyline',
            'nyc downtown financial district',
            'manhattan cityscape',
            'new york urban architecture',
            'nyc midtown buildings',
            'new york city aerial',
        )),
        City('boston', 'Boston', (
            'boston downtown skyline',
            'boston cityscape',
            'boston financial district',
            'boston urban buildings',
        )),
        City('philadelphia', 'Philadelphia', (
            'philadelphia downtown skyline',
            'philadelphia cityscape',
            'philly urban buildings',
            'philadelphia center city',
        )),
        City('miami', 'Miami', (
            'miami downtown skyline',
            'miami brickell cityscape',
            'miami urban buildings',
            'miami financial district',
            'miami city aerial',
        )),
        City('washington-dc', 'Washington D.C.', (
            'washington dc downtown',
            'dc cityscape buildings',
            'washington dc urban architecture',
        )),
        City('baltimore', 'Baltimore', (
            'baltimore downtown skyline',
            'baltimore inner harbor cityscape',
            'baltimore urban buildings',
        )),
        City('atlanta', 'Atlanta', (
            'atlanta downtown skyline',
            'atlanta cityscape',
            'atlanta midtown buildings',
            'atlanta urban architecture',
        )),
        City('charlotte', 'Charlotte', (
            'charlotte north carolina downtown skyline',
            'charlotte cityscape',
            'charlotte uptown buildings',
        )),
        City('chicago', 'Chicago', (
            'chicago downtown skyline',
            'chicago loop cityscape',
            'chicago urban architecture',
            'chicago michigan avenue',
            'chicago city aerial',
        )),
        City('pittsburgh', 'Pittsburgh', (
            'pittsburgh downtown skyline',
            'pittsburgh cityscape',
            'pittsburgh golden triangle',
        )),
        City('detroit', 'Detroit', (
            'detroit downtown skyline',
            'detroit cityscape',
            'detroit urban buildings',
        )),
    ),
}
