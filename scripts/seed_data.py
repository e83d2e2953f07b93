#!/usr/bin/env python3
"""
Seed script: creates a small demo dataset across the four services.

Creates:
  • 6 users (user service)
  • A follow graph, each user following 2-4 others (social graph service)
  • 2 posts per user, every one going through the author check (post service)
  • Some likes and comments (interaction service)

Run once the services are up (the post service must be pointed at the user
service, e.g. POST_SERVICE_USER_SERVICE_URL=http://localhost:8001):
  python scripts/seed_data.py --user-url http://localhost:8001 \
      --post-url http://localhost:8002 --graph-url http://localhost:8003 \
      --interaction-url http://localhost:8004
"""
import argparse
import json
import random
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Optional


DEMO_USERS = [
    ("demo-user-1", "Emma Watson", "https://randomuser.me/api/portraits/women/65.jpg"),
    ("demo-user-2", "Scarlett Johansson", "https://randomuser.me/api/portraits/women/68.jpg"),
    ("demo-user-3", "Zendaya", "https://randomuser.me/api/portraits/women/69.jpg"),
    ("demo-user-4", "Bob Martinez", None),
    ("demo-user-5", "Carol Singh", None),
    ("demo-user-6", "Dave Kim", None),
]

SAMPLE_POSTS = [
    "Hello, this is my first post!",
    "Excited to join!",
    "Saying hi to everyone!",
    "Another day, another post.",
    "Four services, one dependency. Keeping it simple.",
    "Set semantics make likes idempotent for free.",
]

SAMPLE_COMMENTS = [
    "Nice!",
    "Welcome aboard.",
    "Totally agree.",
    "Great post 👏",
]


@dataclass
class ApiClient:
    base_url: str

    def send(self, method: str, path: str, data: Optional[dict] = None) -> dict:
        url = f"{self.base_url}{path}"
        body = json.dumps(data).encode() if data is not None else None
        req = urllib.request.Request(
            url, data=body, headers={"Content-Type": "application/json"}, method=method
        )
        try:
            with urllib.request.urlopen(req, timeout=10) as resp:
                raw = resp.read()
                return json.loads(raw) if raw else {}
        except urllib.error.HTTPError as e:
            detail = e.read().decode()
            print(f"  HTTP {e.code} on {method} {path}: {detail}")
            return {}

    def post(self, path: str, data: dict) -> dict:
        return self.send("POST", path, data)

    def get(self, path: str) -> dict:
        return self.send("GET", path)


def wait_for(client: ApiClient, retries: int = 15) -> None:
    print(f"Waiting for {client.base_url} ...")
    for _ in range(retries):
        try:
            if client.get("/health").get("status") == "ok":
                return
        except (urllib.error.URLError, OSError):
            pass
        time.sleep(2)
    raise RuntimeError(f"{client.base_url} not reachable after {retries} retries")


def main(user_url: str, post_url: str, graph_url: str, interaction_url: str) -> None:
    users = ApiClient(user_url)
    posts = ApiClient(post_url)
    graph = ApiClient(graph_url)
    interactions = ApiClient(interaction_url)
    for client in (users, posts, graph, interactions):
        wait_for(client)
    print("  All services ready!\n")

    # ── Register users ───────────────────────────────────────────────────
    print("Registering users...")
    user_ids: list[str] = []
    for user_id, name, avatar_url in DEMO_USERS:
        result = users.post(
            "/users/",
            {
                "id": user_id,
                "username": user_id,     # demo usernames mirror ids
                "name": name,
                "bio": f"Hi, I'm {name}!",
                "avatar_url": avatar_url,
            },
        )
        if result.get("id"):
            user_ids.append(user_id)
            print(f"  ✓ {user_id} ({name})")
        else:
            print(f"  ✗ Failed to register {user_id}")

    if not user_ids:
        print("No users registered, aborting")
        return

    # ── Follow graph ─────────────────────────────────────────────────────
    print("\nCreating follow relationships...")
    edges = 0
    for follower_id in user_ids:
        others = [u for u in user_ids if u != follower_id]
        for followee_id in random.sample(others, k=min(random.randint(2, 4), len(others))):
            graph.post("/users/follow", {"follower_id": follower_id, "followee_id": followee_id})
            edges += 1
    print(f"  ✓ {edges} follow edges")

    # ── Posts ────────────────────────────────────────────────────────────
    print("\nCreating posts...")
    post_ids: list[str] = []
    for i, user_id in enumerate(user_ids):
        for j in range(2):
            content = SAMPLE_POSTS[(2 * i + j) % len(SAMPLE_POSTS)]
            result = posts.post("/posts/", {"author": user_id, "content": content})
            if result.get("id"):
                post_ids.append(result["id"])
    print(f"  ✓ {len(post_ids)} posts created")

    # ── Likes and comments ───────────────────────────────────────────────
    print("\nAdding likes and comments...")
    likes = comments = 0
    for post_id in post_ids:
        for user_id in random.sample(user_ids, k=random.randint(0, len(user_ids))):
            interactions.post(f"/posts/{post_id}/like", {"user_id": user_id})
            likes += 1
        if random.random() < 0.5:
            interactions.post(
                f"/posts/{post_id}/comments",
                {"user_id": random.choice(user_ids), "content": random.choice(SAMPLE_COMMENTS)},
            )
            comments += 1
    print(f"  ✓ {likes} likes, {comments} comments")

    print("\n" + "=" * 60)
    print("Seed complete! Try:\n")
    print(f"  curl -s '{post_url}/posts/' | python3 -m json.tool")
    print(f"  curl -s '{graph_url}/users/{user_ids[0]}/followers' | python3 -m json.tool")
    if post_ids:
        print(f"  curl -s '{interaction_url}/posts/{post_ids[0]}/likes' | python3 -m json.tool")
    print("=" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the social network services")
    parser.add_argument("--user-url", default="http://localhost:8001")
    parser.add_argument("--post-url", default="http://localhost:8002")
    parser.add_argument("--graph-url", default="http://localhost:8003")
    parser.add_argument("--interaction-url", default="http://localhost:8004")
    args = parser.parse_args()
    main(args.user_url, args.post_url, args.graph_url, args.interaction_url)
