import json
import os

import boto3
import streamlit as st
from botocore.exceptions import ClientError

# export AWS_PROFILE='your_profile' for local test
function_name = os.environ.get("PRIME_FUNCTION_NAME", "prime-checker")


class PrimeCheckError(Exception):
    pass


def _get_client():
    return boto3.Session().client("lambda")


def build_event(number):
    # same shape API Gateway hands to the function
    return {
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"number": number}),
    }


def invoke_prime_checker(number, client=None):
    """Invoke the deployed prime checker and return the decoded response body.

    Raises PrimeCheckError with the function's error text when the envelope
    does not carry a 200 status.
    """
    client = client or _get_client()
    response = client.invoke(
        FunctionName=function_name,
        InvocationType="RequestResponse",
        Payload=json.dumps(build_event(number)),
    )
    print(f"invoked {function_name}: {response['StatusCode']}")

    envelope = json.loads(response["Payload"].read())
    if "FunctionError" in response:
        raise PrimeCheckError(envelope.get("errorMessage", "Function error"))

    body = json.loads(envelope["body"]) if envelope.get("body") else {}
    if envelope["statusCode"] != 200:
        raise PrimeCheckError(body.get("error", "Request failed"))
    return body


class PrimeCheckerPage:

    def check_number(self):
        st.subheader("Check a number")
        number = st.number_input("Enter an integer", value=17, step=1, format="%d")

        if st.button("Submit"):
            try:
                result = invoke_prime_checker(int(number))
            except PrimeCheckError as e:
                st.error(f"Invalid request: {e}")
                return
            except ClientError as e:
                st.error(f"Error invoking {function_name}: {e}")
                return
            st.session_state["last_result"] = result

        result = st.session_state.get("last_result")
        if result is not None:
            if result["isPrime"]:
                st.success(result["message"])
            else:
                st.info(result["message"])

    def sidebar(self):
        st.sidebar.subheader("Prime number checker")
        st.sidebar.info(f"Backed by the lambda function `{function_name}`")

    def render(self):
        st.set_page_config(page_title="Prime Number Checker", layout="centered")
        st.title("Prime Number Checker")

        if "last_result" not in st.session_state:
            st.session_state["last_result"] = None

        self.sidebar()
        self.check_number()


if __name__ == "__main__":
    PrimeCheckerPage().render()
