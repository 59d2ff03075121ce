import json
from collections import Counter

import pytest

from loganizer.core.analyzer import LogAnalyzer
from loganizer.core.errors import ErrorKind
from loganizer.core.loader import read_configs
from loganizer.core.randomness import SeededRandomSource
from loganizer.core.reporter import export_report, summarize


@pytest.fixture
def sample_batch(tmp_path):
    """Create sample logs of each type and the configuration list"""
    logs = tmp_path / "logs"
    logs.mkdir()

    (logs / "access.log").write_text(
        '192.168.1.100 - john [10/Feb/2024:13:55:36 +0000] "GET /app/status HTTP/1.1" 200 2326\n'
        '192.168.1.101 - jane [10/Feb/2024:13:55:37 +0000] "POST /app/data HTTP/1.1" 500 1234\n'
    )
    (logs / "mysql.err").write_text(
        "2024-02-10T13:55:36.000000Z 0 [ERROR] [MY-010119] Aborting\n"
        "2024-02-10T13:55:37.000000Z 0 [ERROR] [MY-012574] Unable to lock ./ibdata1"
    )
    (logs / "app.log").write_text("started\nprocessing\nstopped")
    (logs / "syslog").write_text("<13>Feb 10 13:55:36 myapp[12345]: Connection established")
    (logs / "empty.log").write_text("")

    configs = [
        {"id": "web", "path": str(logs / "access.log"), "type": "nginx-access"},
        {"id": "db", "path": str(logs / "mysql.err"), "type": "mysql-error"},
        {"id": "app", "path": str(logs / "app.log"), "type": "custom-app"},
        {"id": "sys", "path": str(logs / "syslog"), "type": "syslog"},
        {"id": "empty", "path": str(logs / "empty.log"), "type": "custom-app"},
        {"id": "gone", "path": str(logs / "missing.log"), "type": "nginx-access"},
    ]
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(configs))
    return config_path


def test_full_batch(sample_batch, analyzer, tmp_path):
    """Test loading, analyzing and exporting a mixed batch"""
    configs = read_configs(sample_batch)

    results = analyzer.analyze_all(configs)
    report_path = export_report(tmp_path / "out" / "report.json", results)

    report = {item["log_id"]: item for item in json.loads(report_path.read_text())}
    assert set(report) == {"web", "db", "app", "sys", "empty", "gone"}
    assert report["web"]["message"] == "Nginx access log analyzed: 3 entries processed"
    assert report["db"]["message"] == "MySQL error log analyzed: 2 error entries found"
    assert report["app"]["message"] == "Custom application log analyzed: 3 log entries processed"
    assert report["sys"]["message"] == "Generic log analyzed: 1 lines processed"
    assert report["empty"]["status"] == "FAILED"
    assert report["gone"]["status"] == "FAILED"

    summary = summarize(results)
    assert summary["successful"] == 4
    assert summary["by_kind"] == {"parsing": 1, "missing_file": 1}


def test_random_batch_keeps_bijection(sample_batch):
    """Test injected failures never drop or duplicate results"""
    configs = read_configs(sample_batch) * 5
    analyzer = LogAnalyzer(
        random_source=SeededRandomSource(seed=11, min_delay=0, max_delay=0.01, failure_rate=0.5)
    )

    results = analyzer.analyze_all(configs)

    assert len(results) == len(configs)
    assert Counter(r.log_id for r in results) == Counter(c.id for c in configs)
    injected = [
        r for r in results
        if r.error is not None and r.error.kind is ErrorKind.PARSING
        and r.log_id != "empty"
    ]
    assert all(r.message == "Random parsing error occurred" for r in injected)
