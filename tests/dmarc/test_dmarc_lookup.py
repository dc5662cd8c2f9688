import logging

import dns.exception
import dns.resolver
import pytest

from domain_policy.dmarc import (
    DmarcSyntaxError,
    MultipleRecordsError,
    NoPolicyError,
    Policy,
    TemporaryFailureError,
    is_temporary_failure,
    lookup_dmarc_record,
)
from domain_policy.dmarc import lookup as lookup_module
from domain_policy.dns_resolver import DnsLookupError, DnsNameNotFoundError

from tests.support import FakeTxtLookup


def test_lookup_queries_dmarc_name_and_parses_record():
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": ["v=DMARC1; p=reject; pct=50"]})

    record = lookup_dmarc_record("example.test", lookup_txt)

    assert lookup_txt.queries == ["_dmarc.example.test"]
    assert record.policy is Policy.REJECT
    assert record.percent == 50


def test_non_dmarc_txt_values_are_ignored():
    lookup_txt = FakeTxtLookup(
        {
            "_dmarc.example.test": [
                "google-site-verification=abc",
                "v=DMARC1; p=quarantine",
                "v=spf1 -all",
            ]
        }
    )

    assert lookup_dmarc_record("example.test", lookup_txt).policy is Policy.QUARANTINE


def test_zero_txt_values_is_no_policy():
    with pytest.raises(NoPolicyError) as exc:
        lookup_dmarc_record("example.test", FakeTxtLookup())

    assert exc.value.domain == "example.test"
    assert not is_temporary_failure(exc.value)


def test_prefix_match_is_case_sensitive():
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": ["V=dmarc1; p=reject"]})

    with pytest.raises(NoPolicyError):
        lookup_dmarc_record("example.test", lookup_txt)


def test_multiple_records_are_reported():
    records = ["v=DMARC1; p=reject", "v=DMARC1; p=none"]
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": records})

    with pytest.raises(MultipleRecordsError) as exc:
        lookup_dmarc_record("example.test", lookup_txt)

    assert exc.value.records == records
    assert exc.value.domain == "example.test"


def test_invalid_dmarc_record_propagates_syntax_error():
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": ["v=DMARC1; p=maybe"]})

    with pytest.raises(DmarcSyntaxError):
        lookup_dmarc_record("example.test", lookup_txt)


@pytest.mark.parametrize(
    "error",
    [
        dns.resolver.NXDOMAIN(),
        DnsNameNotFoundError("TXT", "_dmarc.example.test", dns.resolver.NXDOMAIN()),
    ],
)
def test_missing_name_is_no_policy(error):
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": error})

    with pytest.raises(NoPolicyError) as exc:
        lookup_dmarc_record("example.test", lookup_txt)

    assert exc.value.__cause__ is error


@pytest.mark.parametrize(
    "error",
    [
        DnsLookupError("TXT", "_dmarc.example.test", dns.exception.Timeout()),
        dns.resolver.NoNameservers(),
        dns.exception.Timeout(),
        OSError("network unreachable"),
    ],
)
def test_transport_errors_are_temporary_failures(error):
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": error})

    with pytest.raises(TemporaryFailureError) as exc:
        lookup_dmarc_record("example.test", lookup_txt)

    assert exc.value.temporary is True
    assert exc.value.error is error
    assert is_temporary_failure(exc.value)


def test_default_lookup_uses_dns_resolver(monkeypatch):
    queried = []

    class _Resolver:
        def get_txt(self, name):
            queried.append(name)
            return ["v=DMARC1; p=none"]

    monkeypatch.setattr(lookup_module, "DnsResolver", _Resolver)

    record = lookup_dmarc_record("example.test")

    assert queried == ["_dmarc.example.test"]
    assert record.policy is Policy.NONE


def test_lookup_logs_progress(caplog):
    lookup_txt = FakeTxtLookup({"_dmarc.example.test": ["v=DMARC1; p=none"]})

    caplog.set_level(logging.DEBUG, logger="domain_policy.dmarc.lookup")
    lookup_dmarc_record("example.test", lookup_txt)

    assert "Looking up DMARC record for example.test" in caplog.text
    assert "1 DMARC candidates" in caplog.text
