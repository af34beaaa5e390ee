"""
Fixed ink! module template filled by the module renderer.

Slots: `name`, `evm_id`, `template_version` and `functions` (a list of
FunctionDescription). Formatters: `snake`, `upper_snake`, `capitalize`,
`convert_type`.
"""

TEMPLATE_VERSION = "1"

MODULE_TEMPLATE = r"""{% macro params(inputs) -%}
{% for input in inputs %}{{ input.name }}: {{ input.target_type }}{% if not loop.last %}, {% endif %}{% endfor %}
{%- endmacro %}
//! This file was autogenerated by Sumi (template v{{ template_version }})
#![cfg_attr(not(feature = "std"), no_std)]

use ink_lang as ink;
pub use self::{{ name }}::{
    {{ name | capitalize }},
    {{ name | capitalize }}Ref,
};

/// EVM ID from runtime
const EVM_ID: u8 = {{ evm_id }};

/// The EVM contract delegation module.
#[ink::contract(env = xvm_environment::XvmDefaultEnvironment)]
mod {{ name }} {
{% for function in functions %}

    // Selector for `{{ function.signature }}`
    const {{ function.identifier | upper_snake }}_SELECTOR: [u8; 4] = hex!["{{ function.selector_hex }}"];
{% endfor %}

    use ethabi::{
        ethereum_types::{
            H160,
            U256,
        },
        Token,
    };
    use hex_literal::hex;
    use ink_prelude::vec::Vec;

    #[ink(storage)]
    pub struct {{ name | capitalize }} {
        evm_address: H160,
    }

    impl {{ name | capitalize }} {
        /// Create new abstraction from given contract address.
        #[ink(constructor)]
        pub fn new(evm_address: H160) -> Self {
            Self { evm_address }
        }
{% for function in functions %}

        /// Send `{{ function.name }}` call to contract
        #[ink(message)]
        pub fn {{ function.identifier | snake }}(&mut self{% if function.inputs %}, {{ params(function.inputs) }}{% endif %}) -> {{ function.output }} {
            let encoded_input = Self::{{ function.identifier | snake }}_encode({{ function.inputs | map(attribute="name") | join(", ") }});
            self.env()
                .extension()
                .xvm_call(
                    super::EVM_ID,
                    Vec::from(self.evm_address.as_ref()),
                    encoded_input,
                )
                .is_ok()
        }

        fn {{ function.identifier | snake }}_encode({{ params(function.inputs) }}) -> Vec<u8> {
            let mut encoded = {{ function.identifier | upper_snake }}_SELECTOR.to_vec();
            let input = [
{% for input in function.inputs %}
                {{ input.name }}.tokenize(),
{% endfor %}
            ];

            encoded.extend(&ethabi::encode(&input));
            encoded
        }
{% endfor %}
    }

    trait Tokenize {
        fn tokenize(&self) -> Token;
    }

    impl<T: Tokenize> Tokenize for Vec<T> {
        fn tokenize(&self) -> Token {
            Token::Array(self.iter().map(Tokenize::tokenize).collect())
        }
    }

    impl<A: Tokenize, B: Tokenize> Tokenize for (A, B) {
        fn tokenize(&self) -> Token {
            Token::Tuple(vec![self.0.tokenize(), self.1.tokenize()])
        }
    }

    impl Tokenize for H160 {
        fn tokenize(&self) -> Token {
            Token::Address(*self)
        }
    }

    impl Tokenize for U256 {
        fn tokenize(&self) -> Token {
            Token::Uint(*self)
        }
    }

    impl Tokenize for bool {
        fn tokenize(&self) -> Token {
            Token::Bool(*self)
        }
    }

    impl<T: Tokenize, const N: usize> Tokenize for [T; N] {
        fn tokenize(&self) -> Token {
            Token::FixedArray(self.iter().map(Tokenize::tokenize).collect())
        }
    }
}"""
