import requests
import json
import time

BASE_URL = "http://localhost:8080"

run_id = int(time.time() * 1000)
TEAM_NAME = f"team_{run_id}"
PR_ID = f"pr_{run_id}"
PR_ID_SMALL = f"pr_small_{run_id}"

USER_AUTHOR = f"u_author_{run_id}"
USER_REV_A = f"u_rev_a_{run_id}"
USER_REV_B = f"u_rev_b_{run_id}"
USER_REV_C = f"u_rev_c_{run_id}"


def print_step(title):
    print("\n" + "=" * 80)
    print(f"--- {title.upper()} ---")
    print("=" * 80)


def print_request(method, url, payload=None):
    print(f"REQUEST: {method} {url}")
    if payload:
        print(f"PAYLOAD: {json.dumps(payload, indent=2, ensure_ascii=False)}")


def print_response(response):
    print(f"RESPONSE: {response.status_code}")
    try:
        print(f"DATA: {json.dumps(response.json(), indent=2, ensure_ascii=False)}")
    except requests.exceptions.JSONDecodeError:
        print("DATA: (No JSON body)")
    print("-" * 80)


def post(path, payload):
    print_request("POST", f"{BASE_URL}{path}", payload)
    resp = requests.post(f"{BASE_URL}{path}", json=payload)
    print_response(resp)
    return resp


def get(path, params):
    print_request("GET", f"{BASE_URL}{path}?{'&'.join(f'{k}={v}' for k, v in params.items())}")
    resp = requests.get(f"{BASE_URL}{path}", params=params)
    print_response(resp)
    return resp


def run_test_flow():
    """
    Runs the end-to-end scenario against a live server.
    """
    try:
        print_step("1. upsert team")
        resp = post("/team/add", {
            "team_name": TEAM_NAME,
            "members": [
                {"user_id": USER_AUTHOR, "username": "Author Alice", "is_active": True},
                {"user_id": USER_REV_A, "username": "Reviewer Bob", "is_active": True},
                {"user_id": USER_REV_B, "username": "Reviewer Charlie", "is_active": True},
                {"user_id": USER_REV_C, "username": "Replacement David", "is_active": True}
            ]
        })
        assert resp.status_code == 201

        print_step("2. get team")
        resp = get("/team/get", {"team_name": TEAM_NAME})
        assert resp.status_code == 200
        assert len(resp.json()['members']) == 4

        print_step("3. create pr (auto assignment)")
        pr_payload = {
            "pull_request_id": PR_ID,
            "pull_request_name": "New feature",
            "author_id": USER_AUTHOR
        }
        resp = post("/pullRequest/create", pr_payload)
        assert resp.status_code == 201
        pr_data = resp.json()
        assert len(pr_data['assigned_reviewers']) == 2, "expected two reviewers"
        assert USER_AUTHOR not in pr_data['assigned_reviewers'], "author must not review own PR"

        reviewer_a, reviewer_b = pr_data['assigned_reviewers']

        print_step("4. duplicate create")
        resp = post("/pullRequest/create", pr_payload)
        assert resp.status_code == 409
        assert resp.json()['detail']['error']['code'] == "PR_EXISTS"

        print_step("5. reviews of a reviewer")
        resp = get("/users/getReview", {"user_id": reviewer_a})
        assert resp.status_code == 200
        assert [pr['pull_request_id'] for pr in resp.json()['pull_requests']] == [PR_ID]

        print_step("6. reassign reviewer")
        expected_replacement = ({USER_REV_A, USER_REV_B, USER_REV_C} - {reviewer_a, reviewer_b}).pop()
        resp = post("/pullRequest/reassign", {"pull_request_id": PR_ID, "old_user_id": reviewer_a})
        assert resp.status_code == 200
        assert resp.json()['replaced_by'] == expected_replacement
        current_reviewers = resp.json()['pr']['assigned_reviewers']
        assert reviewer_a not in current_reviewers
        assert reviewer_b in current_reviewers
        assert expected_replacement in current_reviewers

        print_step("7. reassign to the only remaining candidate")
        resp = post("/pullRequest/reassign", {"pull_request_id": PR_ID, "old_user_id": reviewer_b})
        assert resp.status_code == 200
        assert resp.json()['replaced_by'] == reviewer_a

        resp = post("/users/setIsActive", {"user_id": USER_REV_A, "is_active": False})
        assert resp.status_code == 200
        assert resp.json()['is_active'] is False

        print_step("8. inactive users are not assigned")
        resp = post("/pullRequest/create", {
            "pull_request_id": PR_ID_SMALL,
            "pull_request_name": "Small change",
            "author_id": USER_AUTHOR
        })
        assert resp.status_code == 201
        assert USER_REV_A not in resp.json()['assigned_reviewers']

        print_step("9. merge pr (twice)")
        resp = post("/pullRequest/merge", {"pull_request_id": PR_ID})
        assert resp.status_code == 200
        assert resp.json()['status'] == "MERGED"
        merged_at = resp.json()['merged_at']

        resp = post("/pullRequest/merge", {"pull_request_id": PR_ID})
        assert resp.status_code == 200, "repeated merge must succeed"
        assert resp.json()['merged_at'] == merged_at

        print_step("10. reassign after merge")
        resp = post("/pullRequest/reassign", {"pull_request_id": PR_ID, "old_user_id": expected_replacement})
        assert resp.status_code == 409
        assert resp.json()['detail']['error']['code'] == "PR_MERGED"

        print_step("11. not found")
        resp = get("/team/get", {"team_name": "non-existent-team"})
        assert resp.status_code == 404
        assert resp.json()['detail']['error']['code'] == "NOT_FOUND"

        print_step("all checks passed")

    except AssertionError as e:
        print("\n" + "!" * 80)
        print("!!! TEST FAILED !!!")
        print(f"ERROR: {e}")
        print("!" * 80)
    except requests.exceptions.ConnectionError:
        print("\n" + "!" * 80)
        print("!!! TEST FAILED !!!")
        print(f"COULD NOT CONNECT TO {BASE_URL}")
        print("Make sure the service is running.")
        print("!" * 80)


if __name__ == "__main__":
    run_test_flow()
