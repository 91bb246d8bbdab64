import json
from datetime import date
from unittest.mock import MagicMock

import openai

from travel_whisperer.client.views import ContactForm, ExploreView, PlanView

from fakes import FakeSDK, status_error

BASE_URL = "http://testserver"


def make_plan(session):
    view = PlanView(BASE_URL, "publishable-key", session=session)
    view.form.destination = "Kyoto"
    view.form.start_date = date(2025, 4, 1)
    view.form.end_date = date(2025, 4, 4)
    return view


def test_plan_missing_destination_blocks_without_network():
    session = MagicMock()
    view = PlanView(BASE_URL, "publishable-key", session=session)
    view.form.start_date = date(2025, 4, 1)
    view.form.end_date = date(2025, 4, 4)

    assert view.submit() is False
    session.post.assert_not_called()
    assert view.notifications[-1].title == "Missing Information"
    assert view.notifications[-1].variant == "destructive"


def test_plan_submit_success(api):
    sdk = FakeSDK(content="Day 1: Fushimi Inari at sunrise")
    view = make_plan(api(sdk))
    view.toggle_interest("Photography")
    view.toggle_interest("Shopping")
    view.toggle_interest("Shopping")

    assert view.submit() is True
    assert view.itinerary == "Day 1: Fushimi Inari at sunrise"
    assert view.loading is False
    assert view.notifications[-1].title == "Itinerary Generated! ✈️"

    prompt = sdk.calls[0]["messages"][1]["content"]
    assert "3-day itinerary for Kyoto" in prompt
    assert "Interests: Photography\n" in prompt


def test_plan_failure_keeps_previous_itinerary(api):
    sdk = FakeSDK(error=status_error(openai.RateLimitError, 429))
    view = make_plan(api(sdk))
    view.itinerary = "previous plan"

    view.submit()
    assert view.itinerary == "previous plan"
    assert view.notifications[-1].description == "Failed to generate itinerary. Please try again."


def test_plan_busy_flag_prevents_second_request():
    session = MagicMock()
    view = make_plan(session)
    view.loading = True

    assert view.submit() is False
    session.post.assert_not_called()


def test_plan_sends_bearer_key_and_payload():
    session = MagicMock()
    session.post.return_value.json.return_value = {"itinerary": "ok"}
    view = make_plan(session)
    view.submit()

    url = session.post.call_args.args[0]
    kwargs = session.post.call_args.kwargs
    assert url == "http://testserver/functions/v1/generate-itinerary"
    assert kwargs["headers"]["Authorization"] == "Bearer publishable-key"
    assert kwargs["json"] == {
        "destination": "Kyoto",
        "startDate": "2025-04-01",
        "endDate": "2025-04-04",
        "budget": 100,
        "interests": [],
        "activityType": "walking",
    }


def test_explore_load_uses_default_query(api):
    records = [{"id": "9", "name": "Petra, Jordan"}]
    sdk = FakeSDK(content=json.dumps(records))
    view = ExploreView(BASE_URL, "publishable-key", session=api(sdk))

    view.load()
    assert view.destinations == records
    assert 'based on: "popular travel destinations"' in sdk.calls[0]["messages"][1]["content"]


def test_explore_search_replaces_destinations(api):
    sdk = FakeSDK(content="not json at all")
    view = ExploreView(BASE_URL, "publishable-key", session=api(sdk))
    view.destinations = [{"id": "old"}]

    view.search("alpine villages")
    assert [d["id"] for d in view.destinations] == ["1", "2", "3"]
    assert 'based on: "alpine villages"' in sdk.calls[0]["messages"][1]["content"]


def test_explore_error_notifies_and_stays_empty(api):
    sdk = FakeSDK(error=status_error(openai.APIStatusError, 402))
    view = ExploreView(BASE_URL, "publishable-key", session=api(sdk))

    view.load()
    assert view.destinations == []
    assert view.notifications[-1].description == "Failed to load destinations"
    assert view.loading is False


def test_add_to_itinerary_notifies():
    view = ExploreView(BASE_URL, "publishable-key", session=MagicMock())
    view.add_to_itinerary({"name": "Swiss Alps"})
    assert view.notifications[-1].description == "Swiss Alps has been added to your travel plans"


def test_contact_form_resets_after_submit():
    form = ContactForm(name="Ada", email="ada@example.com", message="Hi!")
    form.submit()

    assert form.notifications[-1].title == "Message Sent! 📧"
    assert (form.name, form.email, form.message) == ("", "", "")
