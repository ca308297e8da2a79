"""Shared fixtures for htmlform tests."""

import pytest

from htmlform import (
    Checkbox,
    Div,
    FieldSet,
    HTMLAttributes,
    OptGroup,
    Option,
    Password,
    Select,
    Submit,
    Text,
    new_form,
)


@pytest.fixture
def signup_form():
    return new_form("signup", "/signup").add(
        Text(name="user", value="ada"),
        FieldSet(
            legend="Account",
            controls=[
                Password(name="secret", value="hunter2"),
                Div(controls=[Checkbox(name="terms", value="yes", checked=True)]),
            ],
        ),
        Select(
            name="plan",
            options=[
                Option(value="free", label="Free"),
                Option(value="pro", label="Pro", selected=True),
            ],
        ),
        Submit(name="go", value="Sign up"),
    )


@pytest.fixture
def full_bundle() -> HTMLAttributes:
    return HTMLAttributes(
        classes=["wide", "primary"],
        access_key="k",
        id="main",
        dir="rtl",
        lang="fr",
        style="color: red",
        tab_index="2",
        title="Main",
        translate="no",
        content_editable=True,
        hidden=False,
        role="group",
        data={"data-z": "26", "data-a": "1"},
        aria={"label": "Main", "aria-busy": "false"},
    )


@pytest.fixture
def grouped_select() -> Select:
    return Select(
        name="car",
        options=[
            OptGroup(
                label="Swedish",
                options=[Option(value="volvo"), Option(value="saab")],
            ),
        ],
    )
