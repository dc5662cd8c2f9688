from domain_policy import api
from domain_policy import dmarc
from domain_policy import psl
from domain_policy import status


def test_api_exports_library_objects() -> None:
    assert api.parse_dmarc_record is dmarc.parse_dmarc_record
    assert api.lookup_dmarc_record is dmarc.lookup_dmarc_record
    assert api.discover_dmarc_policy is dmarc.discover_dmarc_policy
    assert api.resolve_registrable_domain is psl.resolve_registrable_domain
    assert api.load_suffix_rules is psl.load_suffix_rules
    assert api.ExitCodes is status.ExitCodes
    assert api.Status is status.Status
    assert api.exit_code_for_status is status.exit_code_for_status


def test_api_all_exports() -> None:
    for name in (
        "parse_dmarc_record",
        "parse_tags",
        "lookup_dmarc_record",
        "discover_dmarc_policy",
        "DmarcRecord",
        "NoPolicyError",
        "MultipleRecordsError",
        "TemporaryFailureError",
        "resolve_registrable_domain",
        "parse_suffix_list",
        "fetch_suffix_list",
        "RegistrableDomainNotFoundError",
        "DnsResolver",
        "DnsLookupError",
        "Settings",
        "load_settings",
        "ExitCodes",
        "Status",
    ):
        assert name in api.__all__
        assert hasattr(api, name)
