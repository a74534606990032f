"""End-to-end tests for the GraphQL endpoint."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient
from strawberry.extensions import SchemaExtension

from app.application.use_cases.applications import create_application
from app.application.use_cases.notifications import send_notification
from app.application.use_cases.programs import create_program
from app.infrastructure.security import create_access_token
from app.interfaces.graphql.resolvers import notifications as notification_resolvers
from app.interfaces.graphql.schema import MaskInternalErrors, schema
from main import create_app

NOTIFICATIONS_QUERY = """
query Notifications($pagination: PaginationInput) {
  notifications(pagination: $pagination) {
    count
    data { id type action entityId metadata readAt }
  }
}
"""


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def _auth(user) -> dict[str, str]:
    token = create_access_token({"id": user.id, "email": user.email})
    return {"Authorization": f"Bearer {token}"}


def _graphql(client, query, variables=None, headers=None):
    response = client.post(
        "/graphql", json={"query": query, "variables": variables or {}}, headers=headers or {}
    )
    assert response.status_code == 200
    return response.json()


def _seed(session, user, count=2):
    return [
        send_notification(
            session,
            recipient_id=user.id,
            type="application",
            action="accepted",
            entity_id=index,
            metadata={"programId": "1"},
        )
        for index in range(1, count + 1)
    ]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_login_then_me(client, people):
    login = _graphql(
        client,
        """
        mutation { login(email: "builder@example.com", externalId: "ext-1") {
          token user { id email }
        } }
        """,
    )
    token = login["data"]["login"]["token"]

    me = _graphql(client, "{ me { id email } }", headers={"Authorization": f"Bearer {token}"})

    assert me["data"]["me"] == {"id": str(people["builder"].id), "email": "builder@example.com"}


def test_login_unknown_user_reports_not_found(client):
    result = _graphql(
        client, 'mutation { login(email: "ghost@example.com", externalId: "x") { token } }'
    )

    assert result["errors"][0]["message"] == "User not found"
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_notifications_require_authentication(client):
    result = _graphql(client, NOTIFICATIONS_QUERY)

    assert result["data"] is None
    assert result["errors"][0]["extensions"]["code"] == "UNAUTHENTICATED"


def test_invalid_token_is_treated_as_anonymous(client):
    result = _graphql(
        client, "{ countNotifications }", headers={"Authorization": "Bearer not-a-token"}
    )

    assert result["errors"][0]["extensions"]["code"] == "UNAUTHENTICATED"


def test_list_and_mark_notifications(client, session, people):
    builder = people["builder"]
    first, second = _seed(session, builder)
    headers = _auth(builder)

    listed = _graphql(
        client,
        NOTIFICATIONS_QUERY,
        {"pagination": {"limit": 1, "filter": [{"field": "tab", "value": "progress"}]}},
        headers,
    )["data"]["notifications"]
    assert listed["count"] == 2
    assert listed["data"] == [
        {
            "id": str(second),
            "type": "application",
            "action": "accepted",
            "entityId": "2",
            "metadata": {"programId": "1"},
            "readAt": None,
        }
    ]

    marked = _graphql(
        client,
        f'mutation {{ markNotificationAsRead(id: "{first}") {{ id readAt }} }}',
        headers=headers,
    )["data"]["markNotificationAsRead"]
    assert marked["id"] == str(first)
    assert marked["readAt"] is not None

    count = _graphql(client, "{ countNotifications }", headers=headers)
    assert count["data"]["countNotifications"] == 1

    cleared = _graphql(client, "mutation { markAllNotificationsAsRead }", headers=headers)
    assert cleared["data"]["markAllNotificationsAsRead"] is True
    assert _graphql(client, "{ countNotifications }", headers=headers)["data"] == {
        "countNotifications": 0
    }


def test_marking_someone_elses_notification_is_not_found(client, session, people):
    (notification_id,) = _seed(session, people["builder"], count=1)

    result = _graphql(
        client,
        f'mutation {{ markNotificationAsRead(id: "{notification_id}") {{ id }} }}',
        headers=_auth(people["outsider"]),
    )

    assert result["errors"][0]["message"] == "Notification not found"
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_use_cases_run_in_a_worker_thread(client, people, monkeypatch):
    builder = people["builder"]
    calls = []

    def fake_count(session, *, recipient_id):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            calls.append(("worker", recipient_id))
        else:
            calls.append(("event_loop", recipient_id))
        return 0

    monkeypatch.setattr(notification_resolvers, "count_unread_notifications", fake_count)

    result = _graphql(client, "{ countNotifications }", headers=_auth(builder))

    assert result["data"] == {"countNotifications": 0}
    assert calls == [("worker", builder.id)]


def test_unknown_filter_is_bad_user_input(client, people):
    result = _graphql(
        client,
        NOTIFICATIONS_QUERY,
        {"pagination": {"filter": [{"field": "recipientId", "value": "1"}]}},
        _auth(people["builder"]),
    )

    assert result["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert "recipientId" in result["errors"][0]["message"]


def test_program_application_flow(client, people):
    creator, validator, builder = people["creator"], people["validator"], people["builder"]

    created = _graphql(
        client,
        """
        mutation Create($input: CreateProgramInput!) {
          createProgram(input: $input) { id status validatorId }
        }
        """,
        {"input": {"name": "Infra grants", "validatorId": str(validator.id)}},
        _auth(creator),
    )["data"]["createProgram"]
    assert created["validatorId"] == str(validator.id)

    eligibility = _graphql(
        client,
        "query Can($id: ID!) { canApplyToProgram(programId: $id) { allowed reason } }",
        {"id": created["id"]},
        _auth(creator),
    )["data"]["canApplyToProgram"]
    assert eligibility == {
        "allowed": False,
        "reason": "Program creators cannot apply to their own programs",
    }

    application = _graphql(
        client,
        """
        mutation Apply($input: CreateApplicationInput!) {
          createApplication(input: $input) { id status }
        }
        """,
        {"input": {"programId": created["id"], "name": "Explorer"}},
        _auth(builder),
    )["data"]["createApplication"]

    forbidden = _graphql(
        client,
        f'mutation {{ acceptApplication(id: "{application["id"]}") {{ status }} }}',
        headers=_auth(builder),
    )
    assert forbidden["errors"][0]["extensions"]["code"] == "FORBIDDEN"

    accepted = _graphql(
        client,
        f'mutation {{ acceptApplication(id: "{application["id"]}") {{ status }} }}',
        headers=_auth(validator),
    )
    assert accepted["data"]["acceptApplication"]["status"] == "accepted"

    inbox = _graphql(client, NOTIFICATIONS_QUERY, headers=_auth(builder))
    assert [item["action"] for item in inbox["data"]["notifications"]["data"]] == ["accepted"]


def test_count_subscription_refreshes_after_mark_all(client, session, people):
    builder = people["builder"]
    _seed(session, builder, count=1)
    token = _auth(builder)["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(
        f"/graphql?token={token}", subprotocols=["graphql-transport-ws"]
    ) as websocket:
        websocket.send_json(
            {"type": "connection_init", "payload": {"Authorization": f"Bearer {token}"}}
        )
        assert websocket.receive_json()["type"] == "connection_ack"

        websocket.send_json(
            {
                "id": "1",
                "type": "subscribe",
                "payload": {"query": "subscription { countNotifications }"},
            }
        )
        initial = websocket.receive_json()
        assert initial["type"] == "next"
        assert initial["payload"]["data"] == {"countNotifications": 1}

        _graphql(client, "mutation { markAllNotificationsAsRead }", headers=_auth(builder))

        refreshed = websocket.receive_json()
        assert refreshed["type"] == "next"
        assert refreshed["payload"]["data"] == {"countNotifications": 0}

        websocket.send_json({"id": "1", "type": "complete"})


def test_post_comment_flow(client, people):
    creator, builder = people["creator"], people["builder"]

    post = _graphql(
        client,
        """
        mutation Post($input: CreatePostInput!) { createPost(input: $input) { id title authorId } }
        """,
        {"input": {"title": "Roadmap", "content": "Next quarter"}},
        _auth(creator),
    )["data"]["createPost"]
    assert post["authorId"] == str(creator.id)

    comment = _graphql(
        client,
        """
        mutation Comment($input: CreateCommentInput!) {
          createComment(input: $input) { id commentableType commentableId parentId }
        }
        """,
        {"input": {"commentableType": "post", "commentableId": post["id"], "content": "Nice"}},
        _auth(builder),
    )["data"]["createComment"]
    assert comment["parentId"] is None

    thread = _graphql(
        client,
        """
        query Thread($pagination: PaginationInput) {
          comments(pagination: $pagination, topLevelOnly: true) { count data { id content } }
        }
        """,
        {
            "pagination": {
                "filter": [
                    {"field": "commentableType", "value": "post"},
                    {"field": "commentableId", "value": post["id"]},
                ]
            }
        },
    )["data"]["comments"]
    assert thread == {"count": 1, "data": [{"id": comment["id"], "content": "Nice"}]}

    inbox = _graphql(client, NOTIFICATIONS_QUERY, headers=_auth(creator))
    assert [item["type"] for item in inbox["data"]["notifications"]["data"]] == ["comment"]

    posts = _graphql(client, "{ posts { count data { title } } }")["data"]["posts"]
    assert posts == {"count": 1, "data": [{"title": "Roadmap"}]}


def test_investment_term_requires_the_applicant(client, session, people):
    program = create_program(session, creator_id=people["creator"].id, name="Seed")
    application = create_application(
        session, program_id=program.id, applicant_id=people["builder"].id, name="Wallet"
    )
    mutation = """
    mutation Term($input: CreateInvestmentTermInput!) {
      createInvestmentTerm(input: $input) { id title price }
    }
    """
    variables = {"input": {"applicationId": str(application.id), "title": "Seed", "price": "5"}}

    forbidden = _graphql(client, mutation, variables, _auth(people["outsider"]))
    created = _graphql(client, mutation, variables, _auth(people["builder"]))

    assert forbidden["errors"][0]["extensions"]["code"] == "FORBIDDEN"
    assert created["data"]["createInvestmentTerm"]["price"] == "5"
    terms = _graphql(client, "{ investmentTerms { count } }")["data"]["investmentTerms"]
    assert terms == {"count": 1}


def test_error_masking_is_built_per_request():
    (factory,) = schema.extensions

    assert not isinstance(factory, SchemaExtension)
    assert isinstance(factory(), MaskInternalErrors)
    assert factory() is not factory()
