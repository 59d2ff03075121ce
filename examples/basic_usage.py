import json
import tempfile
from pathlib import Path

from loganizer.core.analyzer import LogAnalyzer
from loganizer.core.loader import read_configs
from loganizer.core.randomness import SeededRandomSource
from loganizer.core.reporter import export_report, summarize


def main():
    """Analyze a small generated batch of log files"""
    with tempfile.TemporaryDirectory() as tmp:
        workdir = Path(tmp)
        config_path = create_sample_batch(workdir)

        configs = read_configs(config_path)
        print(f"Loaded {len(configs)} log configurations")

        # Seeded so repeated runs inject the same failures
        analyzer = LogAnalyzer(random_source=SeededRandomSource(seed=7))
        results = analyzer.analyze_all(configs)

        for result in results:
            print(f"{result.log_id:<8} {result.status.value:<8} {result.message}")
            if not result.succeeded:
                print(f"         {result.error.describe()}")

        summary = summarize(results)
        print(f"\nSummary: {summary['successful']} successful, {summary['failed']} failed")

        report = export_report(workdir / "reports" / "report.json", results)
        print(f"Report written to {report}")
        print(report.read_text())


def create_sample_batch(workdir: Path) -> Path:
    """Write sample logs and the configuration list describing them"""
    (workdir / "access.log").write_text(
        '192.168.1.100 - - [10/Feb/2024:13:55:36 +0000] "GET /api/users HTTP/1.1" 200 2326\n'
        '192.168.1.101 - - [10/Feb/2024:13:55:37 +0000] "POST /api/login HTTP/1.1" 401 1234\n'
    )
    (workdir / "mysql.err").write_text(
        "2024-02-10T13:55:36.000000Z 0 [ERROR] [MY-010119] Aborting\n"
    )
    (workdir / "empty.log").write_text("")

    configs = [
        {"id": "web-1", "path": str(workdir / "access.log"), "type": "nginx-access"},
        {"id": "db-1", "path": str(workdir / "mysql.err"), "type": "mysql-error"},
        {"id": "app-1", "path": str(workdir / "empty.log"), "type": "custom-app"},
        {"id": "gone-1", "path": str(workdir / "missing.log"), "type": "syslog"},
    ]
    config_path = workdir / "config.json"
    config_path.write_text(json.dumps(configs, indent=2))
    return config_path


if __name__ == "__main__":
    main()
