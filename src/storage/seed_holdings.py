from __future__ import annotations

# Purchase lots tracked by the dashboard. cmp/pe_ratio/earnings are the last
# known values and get replaced by live quotes on every refresh.
SEED_HOLDINGS: list[dict] = [
    {"symbol": "HDFCBANK", "name": "HDFC Bank", "sector": "Financial", "exchange": "NSE",
     "purchase_price": 1490.0, "quantity": 50, "cmp": 1700.15, "pe_ratio": 18.8, "earnings": "EPS 91.50"},
    {"symbol": "BAJFINANCE", "name": "Bajaj Finance", "sector": "Financial", "exchange": "NSE",
     "purchase_price": 6466.0, "quantity": 15, "cmp": 8370.0, "pe_ratio": 32.4, "earnings": "EPS 258.60"},
    {"symbol": "ICICIBANK", "name": "ICICI Bank", "sector": "Financial", "exchange": "NSE",
     "purchase_price": 780.0, "quantity": 84, "cmp": 1410.2, "pe_ratio": 19.1, "earnings": "EPS 73.80"},
    {"symbol": "AFFLE", "name": "Affle India", "sector": "Technology", "exchange": "NSE",
     "purchase_price": 1151.0, "quantity": 50, "cmp": 1720.5, "pe_ratio": 61.2, "earnings": "EPS 28.10"},
    {"symbol": "LTIM", "name": "LTIMindtree", "sector": "Technology", "exchange": "NSE",
     "purchase_price": 4775.0, "quantity": 16, "cmp": 5310.0, "pe_ratio": 34.6, "earnings": "EPS 153.40"},
    {"symbol": "KPITTECH", "name": "KPIT Technologies", "sector": "Technology", "exchange": "NSE",
     "purchase_price": 672.0, "quantity": 61, "cmp": 1265.3, "pe_ratio": 48.9, "earnings": "EPS 25.90"},
    {"symbol": "TATATECH", "name": "Tata Technologies", "sector": "Technology", "exchange": "NSE",
     "purchase_price": 1072.0, "quantity": 63, "cmp": 705.4, "pe_ratio": 44.2, "earnings": "EPS 16.00"},
    {"symbol": "DMART", "name": "Avenue Supermarts", "sector": "Consumer", "exchange": "NSE",
     "purchase_price": 3777.0, "quantity": 27, "cmp": 4120.0, "pe_ratio": 92.7, "earnings": "EPS 44.40"},
    {"symbol": "TATACONSUM", "name": "Tata Consumer Products", "sector": "Consumer", "exchange": "NSE",
     "purchase_price": 845.0, "quantity": 90, "cmp": 1085.6, "pe_ratio": 81.5, "earnings": "EPS 13.30"},
    {"symbol": "PIDILITIND", "name": "Pidilite Industries", "sector": "Consumer", "exchange": "NSE",
     "purchase_price": 2376.0, "quantity": 36, "cmp": 2980.0, "pe_ratio": 70.3, "earnings": "EPS 42.40"},
    {"symbol": "TATAPOWER", "name": "Tata Power", "sector": "Power", "exchange": "NSE",
     "purchase_price": 224.0, "quantity": 225, "cmp": 389.9, "pe_ratio": 31.7, "earnings": "EPS 12.30"},
    {"symbol": "KPIGREEN", "name": "KPI Green Energy", "sector": "Power", "exchange": "NSE",
     "purchase_price": 875.0, "quantity": 50, "cmp": 470.25, "pe_ratio": 27.8, "earnings": "EPS 16.90"},
    {"symbol": "SUZLON", "name": "Suzlon Energy", "sector": "Power", "exchange": "NSE",
     "purchase_price": 44.0, "quantity": 450, "cmp": 61.4, "pe_ratio": 39.5, "earnings": "EPS 1.55"},
    {"symbol": "HARIOMPIPE", "name": "Hariom Pipe Industries", "sector": "Pipe", "exchange": "NSE",
     "purchase_price": 580.0, "quantity": 60, "cmp": 455.0, "pe_ratio": 24.1, "earnings": "EPS 18.90"},
    {"symbol": "ASTRAL", "name": "Astral", "sector": "Pipe", "exchange": "NSE",
     "purchase_price": 1517.0, "quantity": 56, "cmp": 1440.8, "pe_ratio": 76.0, "earnings": "EPS 18.95"},
    {"symbol": "POLYCAB", "name": "Polycab India", "sector": "Pipe", "exchange": "NSE",
     "purchase_price": 2818.0, "quantity": 28, "cmp": 7100.0, "pe_ratio": 49.6, "earnings": "EPS 143.10"},
    {"symbol": "EASEMYTRIP", "name": "Easy Trip Planners", "sector": "Others", "exchange": "NSE",
     "purchase_price": 20.0, "quantity": 1332, "cmp": 11.2, "pe_ratio": 35.9, "earnings": "EPS 0.31"},
    {"symbol": "M&M", "name": "Mahindra & Mahindra", "sector": "Others", "exchange": "NSE",
     "purchase_price": 1425.0, "quantity": 20, "cmp": 3150.0, "pe_ratio": 29.4, "earnings": "EPS 107.20"},
    {"symbol": "BAJAJ-AUTO", "name": "Bajaj Auto", "sector": "Others", "exchange": "NSE",
     "purchase_price": 6010.0, "quantity": 8, "cmp": 8750.0, "pe_ratio": 33.1, "earnings": "EPS 264.30"},
]
