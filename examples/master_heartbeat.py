#!/usr/bin/env python3
"""
Look up a cluster's master node and stamp a heartbeat on it.

Usage:
    python examples/master_heartbeat.py my-cluster
    python examples/master_heartbeat.py my-cluster --zone europe-west1-b --dry-run
"""

import argparse
import sys
import time

from gcloud_driver import GcloudDriver
from gcloud_driver.config import load_driver_config


def main():
    parser = argparse.ArgumentParser(description="Stamp a heartbeat on a cluster's master node")
    parser.add_argument("cluster", help="Cluster name")
    parser.add_argument("--config", default=None, help="Config file path")
    parser.add_argument("--project", help="Project (defaults to driver.default_project)")
    parser.add_argument("--region", help="Region (defaults to driver.default_region)")
    parser.add_argument("--zone", help="Zone of the master (defaults to <region>-b)")
    parser.add_argument("--dry-run", action="store_true", help="Print commands only")
    args = parser.parse_args()

    config = load_driver_config(
        args.config, dry_run=True if args.dry_run else None, required=True
    )
    project = args.project or config.default_project
    region = args.region or config.default_region
    if not project or not region:
        parser.error("project and region must be given or configured as driver defaults")

    driver = GcloudDriver(config)

    node = driver.get_master_node(project, region, args.cluster)
    if node is None:
        # dry-run: no describe output to read the master from
        node = f"{args.cluster}-m"
    print(f"Master node: {node}")

    zone = {"zone": args.zone or f"{region}-b"}
    if not driver.update_metadata(node, zone, "heartbeat", str(int(time.time()))):
        print(f"[ERROR] Failed to update metadata on {node}")
        sys.exit(1)


if __name__ == "__main__":
    main()
