"""能力集合の不変条件と検査関数のテスト。"""

from abc import abstractmethod

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from principles.capability import (
    Capability,
    CapabilitySet,
    capability_set,
    declared_capabilities,
    is_capability_interface,
    perform_all,
)
from principles.inversion import Charger, MessageSender, SmsSender
from principles.segregation import (
    ATMMachine,
    CustomerOperations,
    CustomerTerminal,
    MaintenanceOperations,
    TechnicianConsole,
)
from principles.substitution import Bird, Flyer, Sparrow

# ---------------------------------------------------------------------------
# 戦略（Strategies）
# ---------------------------------------------------------------------------

identifiers = st.from_regex(r"[a-z][a-z_]{0,15}", fullmatch=True)

valid_operations = st.lists(identifiers, min_size=1, max_size=8, unique=True).map(tuple)


class TestCapabilitySetInvariants:
    """``CapabilitySet`` の不変条件テスト。"""

    @given(name=identifiers, operations=valid_operations)
    @settings(max_examples=100)
    def test_valid_construction(self, name: str, operations: tuple[str, ...]) -> None:
        cs = CapabilitySet(name=name, operations=operations)
        assert cs.name == name
        assert cs.operations == operations

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(AssertionError, match="name must not be empty"):
            CapabilitySet(name="", operations=("withdraw",))

    def test_empty_operations_rejected(self) -> None:
        with pytest.raises(AssertionError, match="at least one operation"):
            CapabilitySet(name="Empty", operations=())

    @given(operation=identifiers)
    @settings(max_examples=50)
    def test_duplicate_operations_rejected(self, operation: str) -> None:
        with pytest.raises(AssertionError, match="duplicate operations"):
            CapabilitySet(name="Dup", operations=(operation, operation))

    def test_immutable(self) -> None:
        cs = capability_set(CustomerOperations)
        with pytest.raises(AttributeError):
            cs.name = "Other"  # type: ignore[misc]


class TestCapabilityInspection:
    def test_capability_set_keeps_declaration_order(self) -> None:
        assert capability_set(CustomerOperations).operations == (
            "withdraw",
            "deposit",
            "check_balance",
        )
        assert capability_set(MaintenanceOperations).operations == ("refill_cash", "repair")
        assert capability_set(Bird).operations == ("eat",)
        assert capability_set(Flyer).operations == ("fly",)

    def test_entities_are_not_interfaces(self) -> None:
        assert is_capability_interface(CustomerOperations)
        assert not is_capability_interface(CustomerTerminal)
        assert not is_capability_interface(Capability)
        with pytest.raises(AssertionError, match="not a capability interface"):
            capability_set(CustomerTerminal)

    def test_declared_capabilities(self) -> None:
        assert declared_capabilities(CustomerTerminal()) == (CustomerOperations,)
        assert declared_capabilities(TechnicianConsole) == (MaintenanceOperations,)
        assert set(declared_capabilities(ATMMachine)) == {
            CustomerOperations,
            MaintenanceOperations,
        }
        assert declared_capabilities(Sparrow) == (Bird, Flyer)

    def test_partial_implementation_cannot_be_instantiated(self) -> None:
        class HalfTerminal(CustomerOperations):
            def withdraw(self) -> str:
                return "Withdrawing cash"

        with pytest.raises(TypeError):
            HalfTerminal()  # type: ignore[abstract]

    def test_interface_without_operations_is_rejected(self) -> None:
        class Nothing(Capability):
            pass

        with pytest.raises(AssertionError, match="at least one operation"):
            capability_set(Nothing)


class TestPerformAll:
    def test_collects_messages_in_order(self) -> None:
        assert perform_all(CustomerTerminal(), CustomerOperations) == [
            "Withdrawing cash",
            "Depositing cash",
            "Checking balance",
        ]

    def test_passes_arguments(self) -> None:
        assert perform_all(SmsSender(), MessageSender, "hi") == ["Sending SMS: hi"]

    def test_undeclared_capability_rejected(self) -> None:
        with pytest.raises(AssertionError, match="does not declare MaintenanceOperations"):
            perform_all(CustomerTerminal(), MaintenanceOperations)

    def test_empty_confirmation_rejected(self) -> None:
        class SilentTerminal(CustomerTerminal):
            def deposit(self) -> str:
                return ""

        with pytest.raises(AssertionError, match="postcondition failed"):
            perform_all(SilentTerminal(), CustomerOperations)

    def test_unrelated_abstraction_rejected(self) -> None:
        with pytest.raises(AssertionError, match="does not declare Charger"):
            perform_all(CustomerTerminal(), Charger)


class _Reporter(Capability):
    @abstractmethod
    def report(self) -> str: ...


def test_locally_defined_interface() -> None:
    class Clerk(_Reporter):
        def report(self) -> str:
            return "Reporting"

    assert declared_capabilities(Clerk()) == (_Reporter,)
    assert perform_all(Clerk(), _Reporter) == ["Reporting"]
