from appsec import AppSecClient, Config, NotFoundError
import sys

# Example: review and tighten attack group actions
#
# Lists every attack group action of a security policy, then switches
# one group to "deny". Credentials come from the [default] section of
# ~/.edgerc; signing is done by whatever httpx.Auth you pass as `auth`
# (an EdgeGrid signer in practice).
#
# Usage: python attack_groups.py <config_id> <version> <policy_id> [group]


def run(config_id: int, version: int, policy_id: str, group: str = "XSS", auth=None):
    config = Config.from_edgerc(section="default")

    with AppSecClient.from_config(config, auth=auth) as client:
        print(f"🔗 {client.base_url} config {config_id} v{version} policy {policy_id}")

        result = client.attack_groups.list(config_id, version, policy_id)
        for entry in result.attack_groups:
            print(f"  {entry.group:<10} {entry.action}")

        try:
            before = client.attack_groups.get(config_id, version, policy_id, group)
        except NotFoundError as e:
            print(f"❌ {e}")
            sys.exit(1)

        if before.action != "deny":
            after = client.attack_groups.update(config_id, version, policy_id, group, action="deny")
            print(f"✅ {group}: {before.action} -> {after.action}")
        else:
            print(f"✅ {group} already denies")

        client.version_notes.update(config_id, version, f"{group} set to deny")


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("usage: attack_groups.py <config_id> <version> <policy_id> [group]")
        sys.exit(1)
    run(int(sys.argv[1]), int(sys.argv[2]), sys.argv[3], *sys.argv[4:5])
