SAMPLE_RECORDS = [
    {
        "name": "Hanbit Foods",
        "current_assets": 200,
        "current_liabilities": 100,
        "total_debt": 50,
        "equity": 200,
    },
    {
        "name": "Daesung Steel",
        "current_assets": 100,
        "current_liabilities": 100,
        "total_debt": 150,
        "equity": 100,
    },
    {
        "name": "Mirae Cash Holdings",
        "current_assets": 150,
        "current_liabilities": 0,
        "total_debt": 0,
        "equity": 0,
    },
]
