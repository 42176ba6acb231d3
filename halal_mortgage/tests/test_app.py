from halal_mortgage.app.streamlit_app import default_buyout


def test_default_buyout_is_the_even_split():
    assert default_buyout(240_000, 20) == 1000.0


def test_default_buyout_never_below_widget_minimum():
    # 0.01 financed over 20 years rounds to a zero buyout
    assert default_buyout(0.01, 20) == 1.0
