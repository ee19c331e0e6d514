"""
Shared fixtures: a small raw institutions feed shaped like the FDIC CSV.
"""
import pandas as pd
import pytest


RAW_CSV = """CERT,NAME,STNAME,CITY,ZIP,ACTIVE,INACTIVE,ESTYMD,ENDEFYMD,CFPBENDDTE,CHANGEC1,BKCLASS,FED,FDICREGN,FDICDBS,OTSDIST
101,First Prairie Bank,Illinois,Chicago,60601,1,0,01/15/1990,12/31/9999,12/31/9999,,N,7,Chicago,09,3
102,Harbor Savings,New York,Albany,12207,0,1,03/01/1985,06/30/2005,12/31/9999,223,SM,2,New York,02,1
103,Lone Star National,Texas,Dallas,75201,1,0,07/04/2001,12/31/9999,12/31/9999,,NM,11,Dallas,13,
104,Old Colony Trust,Massachusetts,Boston,02110,0,1,10/10/1975,02/28/2010,12/31/9999,211,SB,1,Boston,01,1
"""


@pytest.fixture
def raw_csv_text():
    return RAW_CSV


@pytest.fixture
def raw_institutions():
    """Raw feed as an all-string frame, the way an untyped reader would hand it over."""
    return pd.DataFrame(
        {
            "CERT": ["101", "102", "103", "104"],
            "NAME": ["First Prairie Bank", "Harbor Savings", "Lone Star National", "Old Colony Trust"],
            "STNAME": ["Illinois", "New York", "Texas", "Massachusetts"],
            "CITY": ["Chicago", "Albany", "Dallas", "Boston"],
            "ACTIVE": ["1", "0", "1", "0"],
            "INACTIVE": ["0", "1", "0", "1"],
            "ESTYMD": ["01/15/1990", "03/01/1985", "07/04/2001", "10/10/1975"],
            "ENDEFYMD": ["12/31/9999", "06/30/2005", "12/31/9999", "02/28/2010"],
            "CFPBENDDTE": ["12/31/9999"] * 4,
            "CHANGEC1": [None, "223", None, "211"],
            "BKCLASS": ["N", "SM", "NM", "SB"],
            "FED": ["7", "2", "11", "1"],
            "FDICREGN": ["Chicago", "New York", "Dallas", "Boston"],
            "FDICDBS": ["09", "02", "13", "01"],
            "OTSDIST": ["3", "1", None, "1"],
        }
    )


@pytest.fixture
def scenario_institutions():
    """Three cleaned records; the second closed on 2020-12-01."""
    return pd.DataFrame(
        {
            "CERT": pd.array([1, 2, 3], dtype="Int64"),
            "ESTYMD": pd.to_datetime(["2020-01-01", "2020-06-15", "2021-02-01"]),
            "ENDEFYMD": pd.to_datetime([None, "2020-12-01", None]),
            "INACTIVE": pd.array([False, True, False], dtype="boolean"),
        }
    )
