"""Mock feedback used to seed an empty store for demos."""

from feedback_triage.feedback.domain.record import NewFeedback

MOCK_FEEDBACK: tuple[NewFeedback, ...] = (
    NewFeedback(
        source="discord",
        content="Would love to see dark mode in the dashboard!",
        author="user#1234",
        sentiment="positive",
        urgency=2,
    ),
    NewFeedback(
        source="discord",
        content="The new D1 database is incredibly fast. Great work team!",
        author="developer#5678",
        sentiment="positive",
        urgency=1,
    ),
    NewFeedback(
        source="discord",
        content="Getting timeout errors when deploying Workers. Anyone else seeing this?",
        author="frustrated_dev#9999",
        sentiment="negative",
        urgency=4,
    ),
    NewFeedback(
        source="github",
        content=(
            "Worker crashes when payload exceeds 1MB. Steps to reproduce: "
            "1) Send large request 2) Check logs"
        ),
        author="developer42",
        sentiment="negative",
        urgency=5,
    ),
    NewFeedback(
        source="github",
        content="Feature request: Add TypeScript autocomplete for D1 query results",
        author="typescript_lover",
        sentiment="neutral",
        urgency=2,
    ),
    NewFeedback(
        source="github",
        content="Documentation for Workers AI is excellent. Found what I needed quickly.",
        author="happy_builder",
        sentiment="positive",
        urgency=1,
    ),
    NewFeedback(
        source="support",
        content="URGENT: Our production site is down after deploying worker! Need immediate help.",
        author="enterprise_customer",
        sentiment="negative",
        urgency=5,
    ),
    NewFeedback(
        source="support",
        content="Question about billing: How are Workers AI requests charged?",
        author="finance_team",
        sentiment="neutral",
        urgency=3,
    ),
    NewFeedback(
        source="support",
        content="Your support team was incredibly helpful in debugging our D1 migration issue.",
        author="grateful_customer",
        sentiment="positive",
        urgency=1,
    ),
    NewFeedback(
        source="twitter",
        content=(
            "@Cloudflare Workers AI is incredible! Built sentiment analysis "
            "in 10 mins. Mind blown \N{SHOCKED FACE WITH EXPLODING HEAD}"
        ),
        author="@happy_dev",
        sentiment="positive",
        urgency=1,
    ),
    NewFeedback(
        source="twitter",
        content="Why is the Cloudflare dashboard so slow today? Taking forever to load.",
        author="@impatient_user",
        sentiment="negative",
        urgency=3,
    ),
    NewFeedback(
        source="twitter",
        content="Just deployed my first Worker. The DX is really smooth!",
        author="@first_timer",
        sentiment="positive",
        urgency=1,
    ),
    NewFeedback(
        source="discord",
        content="The D1 console UI could use some improvements. Hard to navigate large tables.",
        author="ux_focused#4444",
        sentiment="neutral",
        urgency=2,
    ),
    NewFeedback(
        source="github",
        content="Bug: Wrangler tail not showing real-time logs as expected",
        author="debugger_dan",
        sentiment="negative",
        urgency=4,
    ),
    NewFeedback(
        source="support",
        content="Loving the new AI bindings! Makes integrating ML so easy.",
        author="ml_enthusiast",
        sentiment="positive",
        urgency=1,
    ),
)
