#!/usr/bin/env python3
"""
Sitemap deployment script.
Registers a scheduled forum_sitemap_flow deployment per configured site.
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Any

import yaml

project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from dotenv import load_dotenv

load_dotenv()

from flows.forum_sitemap_flow import forum_sitemap_flow

DEFAULT_CONFIG_PATH = "deployments/sites_sitemap_config.yaml"
DEFAULT_ENTRYPOINT = "flows/forum_sitemap_flow.py:forum_sitemap_flow"


def get_git_repository_url() -> str:
    """Remote URL of the current git checkout"""
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"], cwd=project_root, capture_output=True, text=True, check=True
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "https://github.com/user/repo.git"


def load_sites_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    config_file = project_root / config_path

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f)


def merge_with_defaults(site_config: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    """Site settings win over defaults"""
    merged = dict(defaults)
    merged.update(site_config)
    merged.setdefault("schedule", "0 */6 * * *")
    merged.setdefault("work_pool_name", "default")
    merged.setdefault("entrypoint", DEFAULT_ENTRYPOINT)
    return merged


def build_deploy_parameters(site_config: dict[str, Any]) -> dict[str, Any]:
    return {
        "root_url": site_config["root_url"],
        "output_path": site_config.get("output_path"),
        "max_pages": site_config.get("max_pages"),
    }


def deploy_single_site(site_name: str, site_config: dict[str, Any]) -> None:
    print(f"Deploying sitemap job for {site_name}...")

    if not site_config.get("enabled", True):
        print(f"  Skipping {site_name}: disabled")
        return

    deployment_name = f"sitemap-{site_name}"
    forum_sitemap_flow.from_source(
        source=site_config.get("source_repository") or get_git_repository_url(),
        entrypoint=site_config["entrypoint"],
    ).deploy(
        name=deployment_name,
        work_pool_name=site_config["work_pool_name"],
        cron=site_config["schedule"],
        parameters=build_deploy_parameters(site_config),
        ignore_warnings=True,
        description=f"Sitemap generation for {site_name}",
        tags=["sitemap", site_name],
    )

    print(f"  Deployed {deployment_name} (schedule: {site_config['schedule']})")


def deploy_sites(config_path: str = DEFAULT_CONFIG_PATH, only_site: str | None = None) -> None:
    config = load_sites_config(config_path)
    sites = config.get("sites", {})
    defaults = config.get("defaults", {})

    if only_site is not None:
        if only_site not in sites:
            raise KeyError(f"Site '{only_site}' not in config; available: {', '.join(sites)}")
        sites = {only_site: sites[only_site]}

    for site_name, site_config in sites.items():
        deploy_single_site(site_name, merge_with_defaults(site_config, defaults))


def list_sites(config_path: str = DEFAULT_CONFIG_PATH) -> None:
    config = load_sites_config(config_path)
    defaults = config.get("defaults", {})

    for site_name, site_config in config.get("sites", {}).items():
        merged = merge_with_defaults(site_config, defaults)
        status = "enabled" if merged.get("enabled", True) else "disabled"
        print(f"{site_name:20} | {status:8} | {merged['schedule']:15} | {merged['root_url']}")


def main():
    parser = argparse.ArgumentParser(description="Sitemap deployment tool")
    parser.add_argument("action", choices=["deploy", "list"])
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--site", help="Deploy only this site")
    args = parser.parse_args()

    if args.action == "list":
        list_sites(args.config)
    else:
        try:
            deploy_sites(args.config, args.site)
        except (FileNotFoundError, KeyError) as e:
            print(f"Deployment failed: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
