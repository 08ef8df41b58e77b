#!/usr/bin/env python3
"""
Basic ArtifactScorer Usage Example

This example demonstrates the core workflow:
1. Score an OCR text block with the default profile
2. Switch profiles and configuration
3. Inspect roll quality and malformed lines
4. Save the result as an artifact record
"""

import json

import artifactscorer
from artifactscorer import ArtifactType, CalcProfile, ScorerConfig

# OCR output for the substat region, as Tesseract returns it with the
# Japanese whitelist (plain 1-9 come back as circled numerals)
OCR_TEXT = """
会心率 + ⑦.⑧%
会心ダメージ + ②①.0%
攻撃カ + ⑤.⑧%
HP + ②⑨⑨
"""


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Scoring
    # ─────────────────────────────────────────────────────────────────────────

    report = artifactscorer.evaluate(OCR_TEXT)

    print(f"Score: {report.display_score} ({report.tier})")
    for substat in report.substats:
        print(f"  {substat.label:<24} {substat.type.name}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Profiles and Configuration
    # ─────────────────────────────────────────────────────────────────────────

    for profile in CalcProfile:
        score = artifactscorer.compute_score(report.substats, profile)
        print(f"  {profile.name:<18} {score:.1f}")

    config = ScorerConfig(on_malformed_line="raise")
    try:
        artifactscorer.evaluate("会心率12.0%", config=config)
    except artifactscorer.MalformedLineError as e:
        print(f"Rejected: {e}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Roll Quality
    # ─────────────────────────────────────────────────────────────────────────

    for substat, quality in report.roll_qualities:
        print(f"  {substat.label:<24} {quality:5.1f}%")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Artifact Records
    # ─────────────────────────────────────────────────────────────────────────

    artifact = artifactscorer.make_artifact(
        ArtifactType.FLOWER, set_id="emblem", substats=report.substats, level=20
    )
    print(json.dumps(artifact.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
