from decimal import Decimal


def _d(value) -> Decimal:
    return Decimal(str(value))


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestLTRCalculator:
    async def test_canonical_deal(self, client, ltr_payload):
        resp = await client.post("/api/v1/calculator/ltr", json=ltr_payload)
        assert resp.status_code == 200
        data = resp.json()

        assert data["rental_type"] == "ltr"
        assert _d(data["loan_amount"]) == Decimal("200000")
        assert _d(data["monthly_mortgage_payment"]) == Decimal("1330.60")
        assert _d(data["effective_gross_income"]) == Decimal("1900")
        assert _d(data["monthly_cash_flow"]) == Decimal("194.40")
        assert _d(data["total_cash_invested"]) == Decimal("55000")
        assert _d(data["cap_rate"]) == Decimal("7.32")
        assert len(data["yearly_projections"]) == 30
        assert data["monthly_revenue"] == []

    async def test_defaults(self, client):
        resp = await client.post("/api/v1/calculator/ltr", json={})
        assert resp.status_code == 200
        assert _d(resp.json()["gross_monthly_rent"]) == Decimal("2000")

    async def test_projection_years(self, client, ltr_payload):
        resp = await client.post(
            "/api/v1/calculator/ltr", params={"projection_years": 10}, json=ltr_payload
        )
        assert len(resp.json()["yearly_projections"]) == 10

    async def test_discount_rate(self, client, ltr_payload):
        low = await client.post("/api/v1/calculator/ltr", params={"discount_rate": 4}, json=ltr_payload)
        high = await client.post("/api/v1/calculator/ltr", params={"discount_rate": 12}, json=ltr_payload)
        assert _d(high.json()["npv"]) < _d(low.json()["npv"])

    async def test_zero_purchase_price(self, client, ltr_payload):
        resp = await client.post(
            "/api/v1/calculator/ltr", json={**ltr_payload, "purchase_price": "0"}
        )
        assert resp.status_code == 200
        assert _d(resp.json()["cap_rate"]) == Decimal("0")

    async def test_invalid_body(self, client):
        resp = await client.post("/api/v1/calculator/ltr", json={"monthly_rent": "lots"})
        assert resp.status_code == 422

    async def test_percentages_bounded(self, client, ltr_payload):
        for field, value in (
            ("down_payment_pct", "250000"),
            ("vacancy_rate_pct", "-1"),
            ("appreciation_rate_pct", "250000"),
            ("rent_growth_rate_pct", "-100"),
        ):
            resp = await client.post(
                "/api/v1/calculator/ltr", json={**ltr_payload, field: value}
            )
            assert resp.status_code == 422, field

    async def test_largest_inputs_still_round(self, client, ltr_payload):
        resp = await client.post(
            "/api/v1/calculator/ltr",
            params={"projection_years": 50},
            json={
                **ltr_payload,
                "purchase_price": "1000000000000",
                "monthly_rent": "1000000000000",
                "appreciation_rate_pct": "100",
                "rent_growth_rate_pct": "100",
            },
        )
        assert resp.status_code == 200
        assert len(resp.json()["yearly_projections"]) == 50


class TestSTRCalculator:
    async def test_defaults(self, client):
        resp = await client.post("/api/v1/calculator/str", json={})
        assert resp.status_code == 200
        data = resp.json()

        assert data["rental_type"] == "str"
        assert _d(data["gross_annual_rent"]) == Decimal("36240.75")
        assert _d(data["annual_vacancy_loss"]) == Decimal("0")
        assert len(data["monthly_revenue"]) == 12
        assert "cleaning" in data["expense_breakdown"]

    async def test_rate_mode(self, client):
        resp = await client.post(
            "/api/v1/calculator/str",
            json={
                "avg_daily_rate": "999",
                "occupancy_rate_pct": "50",
                "seasonality": ["100"] * 12,
                "seasonality_mode": "rate",
            },
        )
        assert _d(resp.json()["gross_annual_rent"]) == Decimal("18250")

    async def test_seasonality_needs_twelve_months(self, client):
        resp = await client.post("/api/v1/calculator/str", json={"seasonality": ["1"] * 11})
        assert resp.status_code == 422
