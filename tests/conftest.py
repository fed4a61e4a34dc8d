"""Sample hand histories shared by the test modules."""

import pytest

HEADS_UP_SHOWDOWN = """\
PokerStars Hand #100001: Hold'em No Limit ($1/$2 USD) - 2023/01/01 12:00:00 ET
Table 'Alpha' 6-max Seat #1 is the button
Seat 1: Alice ($200 in chips)
Seat 2: Bob ($300 in chips)
Alice: posts small blind $1
Bob: posts big blind $2
*** HOLE CARDS ***
Dealt to Alice [As Ks]
Alice: raises $4 to $6
Bob: calls $4
*** FLOP *** [Ah 7d 2c]
Bob: checks
Alice: bets $10
Bob: calls $10
*** TURN *** [Ah 7d 2c] [9s]
Bob: checks
Alice: bets $54
Bob: calls $54
*** RIVER *** [Ah 7d 2c 9s] [3h]
Bob: checks
Alice: checks
*** SHOW DOWN ***
Alice: shows [As Ks] (a pair of Aces)
Bob: mucks hand
Alice collected $140 from pot
*** SUMMARY ***
Total pot $140 | Rake $0
Board [Ah 7d 2c 9s 3h]
Seat 1: Alice (button) (small blind) showed [As Ks] and won ($140)
Seat 2: Bob (big blind) mucked
"""

SHORT_STACK_ALL_IN = """\
PokerStars Hand #100002: Hold'em No Limit ($5/$10 USD) - 2023/02/03 21:15:30 ET
Table 'Beta' 9-max Seat #3 is the button
Seat 1: Short ($45 in chips)
Seat 2: Mid ($500 in chips)
Seat 3: Big ($800 in chips)
Short: posts small blind $5
Mid: posts big blind $10
*** HOLE CARDS ***
Dealt to Big [Qh Qd]
Big: raises $20 to $30
Short: raises $15 to $45 and is all-in
Mid: calls $35
Big: calls $15
*** FLOP *** [Tc 8s 3d]
Mid: bets $100
Big: calls $100
*** TURN *** [Tc 8s 3d] [Jh]
Mid: checks
Big: checks
*** RIVER *** [Tc 8s 3d Jh] [2s]
Mid: checks
Big: checks
*** SHOW DOWN ***
Mid: shows [9c 9d] (a pair of Nines)
Big: shows [Qh Qd] (a pair of Queens)
Big collected $200 from side pot
Short: shows [Ac Ad] (a pair of Aces)
Short collected $135 from main pot
*** SUMMARY ***
Total pot $335 Main pot $135. Side pot $200. | Rake $0
Board [Tc 8s 3d Jh 2s]
Seat 1: Short (small blind) showed [Ac Ad] and won ($135) with a pair of Aces
Seat 2: Mid (big blind) showed [9c 9d] and lost with a pair of Nines
Seat 3: Big (button) showed [Qh Qd] and won ($200) with a pair of Queens
"""

FOLDED_ON_FLOP = """\
PokerStars Hand #100003: Hold'em No Limit ($0.50/$1 USD) - 2023/03/04 9:05:00 ET
Table 'Gamma' 6-max Seat #4 is the button
Seat 1: Ann ($100 in chips)
Seat 2: Ben ($100 in chips)
Seat 4: Cat ($100 in chips)
Ann: posts small blind $0.50
Ben: posts big blind $1
*** HOLE CARDS ***
Dealt to Cat [7h 7c]
Cat: raises $2 to $3
Ann: folds
Ben: calls $2
*** FLOP *** [Kd 9h 4s]
Ben: checks
Cat: bets $4
Ben: folds
Uncalled bet ($4) returned to Cat
Cat collected $6.50 from pot
Cat: doesn't show hand
*** SUMMARY ***
Total pot $6.50 | Rake $0
Board [Kd 9h 4s]
Seat 1: Ann (small blind) folded before Flop
Seat 2: Ben (big blind) folded on the Flop
Seat 4: Cat (button) collected ($6.50)
"""

TOURNAMENT_SIDE_POTS = """\
PokerStars Hand #200001: Tournament #555, $10+$1 USD Hold'em No Limit - Level I (10/20) - 2023/04/05 18:00:00 ET
Table '555 1' 9-max Seat #1 is the button
Seat 1: Alpha (1000 in chips)
Seat 2: Bravo (300 in chips)
Seat 3: Charlie (600 in chips)
Seat 4: Delta (2000 in chips)
Alpha: posts the ante 5
Bravo: posts the ante 5
Charlie: posts the ante 5
Delta: posts the ante 5
Bravo: posts small blind 10
Charlie: posts big blind 20
*** HOLE CARDS ***
Dealt to Delta [Ac Kd]
Delta: raises 40 to 60
Alpha: calls 60
Bravo: raises 235 to 295 and is all-in
Charlie: raises 300 to 595 and is all-in
Delta: calls 535
Alpha: folds
*** FLOP *** [2c 5d 9h]
*** TURN *** [2c 5d 9h] [Js]
*** RIVER *** [2c 5d 9h Js] [Kc]
*** SHOW DOWN ***
Charlie: shows [Qs Qc] (a pair of Queens)
Delta: shows [Ac Kd] (a pair of Kings)
Charlie collected 600 from side pot
Bravo: shows [Ah Ad] (a pair of Aces)
Bravo collected 965 from main pot
*** SUMMARY ***
Total pot 1565 Main pot 965. Side pot 600. | Rake 0
Board [2c 5d 9h Js Kc]
Seat 1: Alpha (button) folded before Flop
Seat 2: Bravo (small blind) showed [Ah Ad] and won (965) with a pair of Aces
Seat 3: Charlie (big blind) showed [Qs Qc] and won (600) with a pair of Queens
Seat 4: Delta showed [Ac Kd] and lost with a pair of Kings
"""

PREFLOP_WALK = """\
PokerStars Hand #100005: Hold'em No Limit ($1/$2 USD) - 2023/05/06 10:00:00 ET
Table 'Delta' 6-max Seat #1 is the button
Seat 1: Hero ($200 in chips)
Seat 2: Villain ($200 in chips)
Hero: posts small blind $1
Villain: posts big blind $2
*** HOLE CARDS ***
Dealt to Hero [7c 2d]
Hero: folds
Uncalled bet ($1) returned to Villain
Villain collected $2 from pot
Villain: doesn't show hand
*** SUMMARY ***
Total pot $2 | Rake $0
Seat 1: Hero (button) (small blind) folded before Flop
Seat 2: Villain (big blind) collected ($2)
"""

RAKED_SPLIT_POT = """\
PokerStars Hand #100006: Hold'em No Limit ($1/$2 USD) - 2023/06/07 23:59:59 ET
Table 'Epsilon' 6-max Seat #2 is the button
Seat 1: Xavier ($50 in chips)
Seat 2: Yolanda ($75.50 in chips)
Yolanda: posts small blind $1
Xavier: posts big blind $2
*** HOLE CARDS ***
Dealt to Xavier [Jh Jc]
Yolanda: calls $1
Xavier: raises $6 to $8
Yolanda: calls $6
*** FLOP *** [3c 4c 5c]
Xavier: bets $2
Yolanda: calls $2
*** TURN *** [3c 4c 5c] [6d]
Xavier: checks
Yolanda: checks
*** RIVER *** [3c 4c 5c 6d] [Kh]
Xavier: checks
Yolanda: checks
*** SHOW DOWN ***
Xavier: shows [Jh Jc] (a pair of Jacks)
Yolanda: shows [Jd Js] (a pair of Jacks)
Xavier collected $9.50 from pot
Yolanda collected $9.50 from pot
*** SUMMARY ***
Total pot $20 | Rake $1
Board [3c 4c 5c 6d Kh]
Seat 1: Xavier (big blind) showed [Jh Jc] and won ($9.50) with a pair of Jacks
Seat 2: Yolanda (button) (small blind) showed [Jd Js] and won ($9.50) with a pair of Jacks
"""

MAIN_AND_SIDE_SAME_WINNER = """\
PokerStars Hand #100007: Hold'em No Limit ($5/$10 USD) - 2023/07/08 20:00:00 ET
Table 'Zeta' 6-max Seat #3 is the button
Seat 1: Short ($50 in chips)
Seat 2: Mid ($500 in chips)
Seat 3: Big ($500 in chips)
Short: posts small blind $5
Mid: posts big blind $10
*** HOLE CARDS ***
Dealt to Big [Ah Ad]
Big: raises $40 to $50
Short: calls $45 and is all-in
Mid: calls $40
*** FLOP *** [2c 7d Jh]
Mid: bets $75
Big: calls $75
*** TURN *** [2c 7d Jh] [4s]
Mid: checks
Big: checks
*** RIVER *** [2c 7d Jh 4s] [9c]
Mid: checks
Big: checks
*** SHOW DOWN ***
Mid: shows [Kc Kd] (a pair of Kings)
Big: shows [Ah Ad] (a pair of Aces)
Big collected $150 from side pot
Short: shows [Qs Qh] (a pair of Queens)
Big collected $150 from main pot
*** SUMMARY ***
Total pot $300 Main pot $150. Side pot $150. | Rake $0
Board [2c 7d Jh 4s 9c]
Seat 1: Short (small blind) showed [Qs Qh] and lost with a pair of Queens
Seat 2: Mid (big blind) showed [Kc Kd] and lost with a pair of Kings
Seat 3: Big (button) showed [Ah Ad] and won ($300) with a pair of Aces
"""

ALL_HANDS = [
    HEADS_UP_SHOWDOWN,
    SHORT_STACK_ALL_IN,
    FOLDED_ON_FLOP,
    TOURNAMENT_SIDE_POTS,
    PREFLOP_WALK,
    RAKED_SPLIT_POT,
    MAIN_AND_SIDE_SAME_WINNER,
]


@pytest.fixture
def heads_up_showdown() -> str:
    return HEADS_UP_SHOWDOWN


@pytest.fixture
def short_stack_all_in() -> str:
    return SHORT_STACK_ALL_IN


@pytest.fixture
def folded_on_flop() -> str:
    return FOLDED_ON_FLOP


@pytest.fixture
def tournament_side_pots() -> str:
    return TOURNAMENT_SIDE_POTS


@pytest.fixture
def preflop_walk() -> str:
    return PREFLOP_WALK


@pytest.fixture
def raked_split_pot() -> str:
    return RAKED_SPLIT_POT


@pytest.fixture
def main_and_side_same_winner() -> str:
    return MAIN_AND_SIDE_SAME_WINNER
