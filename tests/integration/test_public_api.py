"""
Tests for GET /experiences.
"""


class TestPublicListing:

    def test_only_approved_returned(self, client, add_experience):
        approved = add_experience(status="approved")
        add_experience(status="pending")
        add_experience(status="rejected")

        response = client.get("/experiences")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [d["id"] for d in data] == [approved["id"]]
        assert all(d["status"] == "approved" for d in data)

    def test_keyword_and_company_filters(self, client, add_experience):
        match = add_experience(status="approved", company="Google", interview_questions="Invert a Binary Tree")
        add_experience(status="approved", company="Meta", interview_questions="Invert a Binary Tree")
        add_experience(status="approved", company="Google", interview_questions="Design a rate limiter")

        response = client.get("/experiences", params={"keyword": "BINARY", "company": "goo"})

        assert [d["id"] for d in response.json()["data"]] == [match["id"]]

    def test_empty_filters_return_everything(self, client, add_experience):
        add_experience(status="approved")
        add_experience(status="approved")

        response = client.get("/experiences", params={"keyword": "", "company": ""})

        assert len(response.json()["data"]) == 2

    def test_no_match_is_empty_list(self, client, add_experience):
        add_experience(status="approved")

        response = client.get("/experiences", params={"keyword": "nothing-like-this"})

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_anonymous_entries_masked(self, client, add_experience):
        add_experience(status="approved", is_anonymous=True)

        entry = client.get("/experiences").json()["data"][0]

        assert entry["student_name"] == "Anonymous"
        assert entry["linkedin_url"] is None
